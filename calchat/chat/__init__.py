"""Chat helpers."""

from .grouping import group_messages_by_chat
from .ids import CHAT_ID_SEPARATOR, generate_chat_id

__all__ = ["CHAT_ID_SEPARATOR", "generate_chat_id", "group_messages_by_chat"]
