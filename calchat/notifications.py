"""Notification preference checks."""

from collections.abc import Mapping
from typing import Any

# Notification type -> settings switch that controls it.
NOTIFICATION_SETTINGS: dict[str, str] = {
    "event": "newEventsEnabled",
    "eventChange": "eventChangesEnabled",
    "reminder": "reminderEnabled",
    "mention": "mentionsEnabled",
    "group": "groupChangesEnabled",
    "newMember": "newMembersEnabled",
    "message": "newMessagesEnabled",
}


def is_notification_enabled(notification_type: str, settings: Mapping[str, Any]) -> bool:
    """
    Whether a notification of this type should be shown.

    Switches default to on: only an explicit ``False`` disables a type, and
    types without a switch are always enabled.
    """
    setting = NOTIFICATION_SETTINGS.get(notification_type)
    if setting is None:
        return True
    return settings.get(setting) is not False
