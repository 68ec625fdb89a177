"""Chat identifier derivation."""

from collections.abc import Iterable, Mapping
from typing import Any

from ..logging_config import get_logger, log_context
from ..models import ChatId

logger = get_logger(__name__)

# Reserved: member ids must never contain it, or two member sets can
# produce the same chat id.
CHAT_ID_SEPARATOR = "-"


def _member_id(member: Any) -> str:
    if isinstance(member, Mapping):
        return member["id"]
    return member.id


def generate_chat_id(members: Iterable[Any]) -> ChatId:
    """
    Build a chat id from the ids of its members.

    Ids are sorted in code point order and joined with CHAT_ID_SEPARATOR, so
    any ordering of the same members yields the same chat id. Duplicates are
    kept as they are.

    Args:
        members: Member records, objects with an ``id`` attribute or
                 mappings with an ``"id"`` key.

    Returns:
        The chat id; empty string for no members.
    """
    chat_id = CHAT_ID_SEPARATOR.join(sorted(_member_id(m) for m in members))
    logger.debug("Generated chat id", extra=log_context(chat_id=chat_id))
    return chat_id
