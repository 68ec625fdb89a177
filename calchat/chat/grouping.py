"""Message grouping by chat."""

from collections.abc import Mapping

from ..models import ChatId, Message


def group_messages_by_chat(
    messages_by_chat: Mapping[ChatId, list[Message]],
) -> Mapping[ChatId, list[Message]]:
    """
    Return messages already grouped by chat id, unchanged.

    Messages arrive pre-grouped from the conversation layer. This is a pass
    through: keys, lists and their order are kept, and it does not regroup by
    ``Message.conversation_id``. Callers must not depend on getting the same
    object back versus a copy.
    """
    return messages_by_chat
