"""Group poll data models."""

from dataclasses import dataclass, field


@dataclass
class PollOption:
    """One answer of a poll with the ids of users who picked it."""

    id: str
    text: str
    votes: list[str] = field(default_factory=list)


@dataclass
class Poll:
    """A question posted to a group."""

    id: str
    question: str
    options: list[PollOption]
    created_by: str
    group_id: str
    created_at: str  # ISO timestamp, UTC
    closed: bool = False
