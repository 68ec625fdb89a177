"""Event category registry."""

from ..models import EventCategory

# Display order for category pickers.
EVENT_CATEGORIES: tuple[EventCategory, ...] = (
    EventCategory(value="meeting", label="Meeting", color="#2563eb"),
    EventCategory(value="birthday", label="Geburtstag", color="#f59e42"),
    EventCategory(value="private", label="Privat", color="#64748b"),
    EventCategory(value="holiday", label="Feiertag", color="#22c55e"),
    EventCategory(value="other", label="Sonstiges", color="#a21caf"),
)


def get_event_category(value: str) -> EventCategory | None:
    """Look up a category by its value."""
    for category in EVENT_CATEGORIES:
        if category.value == value:
            return category
    return None
