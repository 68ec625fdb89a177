"""Calendar event helpers."""

from .categories import EVENT_CATEGORIES, get_event_category
from .recurrence import FREQUENCIES, get_recurring_dates, validate_rule

__all__ = [
    "EVENT_CATEGORIES",
    "FREQUENCIES",
    "get_event_category",
    "get_recurring_dates",
    "validate_rule",
]
