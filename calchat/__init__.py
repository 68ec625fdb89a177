"""Chat and calendar helpers."""

from .app import Application, IApplication
from .avatar import get_avatar_url
from .chat import CHAT_ID_SEPARATOR, generate_chat_id, group_messages_by_chat
from .events import EVENT_CATEGORIES, get_event_category, get_recurring_dates
from .exceptions import (
    CalchatError,
    InvalidRecurrenceRuleError,
    PollClosedError,
    PollNotFoundError,
    UnknownPollOptionError,
)
from .models import (
    Attachment,
    ChatId,
    EventCategory,
    Member,
    Message,
    Poll,
    PollOption,
    RecurrenceRule,
    SearchHit,
)
from .notifications import NOTIFICATION_SETTINGS, is_notification_enabled
from .polls import PollRegistry, close_poll, create_poll, poll_results, vote
from .search import SearchEngine, search_items

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "ChatId",
    "Member",
    "Message",
    "Attachment",
    "EventCategory",
    "RecurrenceRule",
    "Poll",
    "PollOption",
    "SearchHit",
    # Chat
    "CHAT_ID_SEPARATOR",
    "generate_chat_id",
    "group_messages_by_chat",
    # Events
    "EVENT_CATEGORIES",
    "get_event_category",
    "get_recurring_dates",
    # Search
    "SearchEngine",
    "search_items",
    # Polls
    "PollRegistry",
    "create_poll",
    "vote",
    "close_poll",
    "poll_results",
    # Misc
    "get_avatar_url",
    "NOTIFICATION_SETTINGS",
    "is_notification_enabled",
    # Errors
    "CalchatError",
    "InvalidRecurrenceRuleError",
    "PollClosedError",
    "PollNotFoundError",
    "UnknownPollOptionError",
]
