"""Core data models for calchat."""

from .messages import Attachment, ChatId, Member, Message
from .events import EventCategory, Frequency, RecurrenceRule
from .polls import Poll, PollOption
from .search import SearchHit

__all__ = [
    # Messages
    "ChatId",
    "Member",
    "Message",
    "Attachment",
    # Events
    "EventCategory",
    "Frequency",
    "RecurrenceRule",
    # Polls
    "Poll",
    "PollOption",
    # Search
    "SearchHit",
]
