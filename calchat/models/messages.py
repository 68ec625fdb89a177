"""Chat-related data models."""

from dataclasses import dataclass, field

ChatId = str


@dataclass
class Member:
    """A chat participant. Only the id takes part in chat id derivation."""

    id: str


@dataclass
class Attachment:
    """A file sent along with a message."""

    name: str
    type: str  # MIME-like, e.g. "image/png"
    size: int  # bytes
    url: str | None = None


@dataclass
class Message:
    """A single chat message."""

    id: str
    sender: str
    content: str
    time: str  # opaque display/sort string
    sender_name: str | None = None
    attachments: list[Attachment] = field(default_factory=list)
    conversation_id: str | None = None
