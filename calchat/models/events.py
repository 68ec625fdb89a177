"""Calendar event data models."""

from dataclasses import dataclass
from typing import Literal

Frequency = Literal["daily", "weekly", "monthly", "yearly"]


@dataclass(frozen=True)
class EventCategory:
    """A labeled, colored tag for calendar events."""

    value: str
    label: str
    color: str  # hex, e.g. "#2563eb"


@dataclass
class RecurrenceRule:
    """How often an event repeats and when the series ends."""

    frequency: Frequency
    interval: int = 1
    count: int | None = None
    until: str | None = None  # ISO date, inclusive
