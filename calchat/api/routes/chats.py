"""Chat API routes."""

from dataclasses import asdict

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException

from ...chat import generate_chat_id, group_messages_by_chat
from ...models import Attachment, Message


class MemberModel(BaseModel):
    """A chat participant."""

    id: str


class AttachmentModel(BaseModel):
    """A file attached to a message."""

    name: str
    type: str
    size: int
    url: str | None = None


class MessageModel(BaseModel):
    """A chat message."""

    id: str
    sender: str
    content: str
    time: str
    sender_name: str | None = None
    attachments: list[AttachmentModel] = Field(default_factory=list)
    conversation_id: str | None = None

    def to_message(self) -> Message:
        return Message(
            id=self.id,
            sender=self.sender,
            content=self.content,
            time=self.time,
            sender_name=self.sender_name,
            attachments=[Attachment(**a.model_dump()) for a in self.attachments],
            conversation_id=self.conversation_id,
        )


class ChatIdRequest(BaseModel):
    """Request model for deriving a chat id."""

    members: list[MemberModel]


class ChatIdResponse(BaseModel):
    """Response model for chat id."""

    chat_id: str


def create_chats_router() -> APIRouter:
    """Create chats router."""
    router = APIRouter(prefix="/api/chats", tags=["chats"])

    @router.post("/id", response_model=ChatIdResponse)
    async def chat_id(request: ChatIdRequest) -> dict:
        """Derive the chat id for a set of members."""
        return {"chat_id": generate_chat_id(request.members)}

    @router.post("/grouped", response_model=dict[str, list[MessageModel]])
    async def grouped_messages(request: dict[str, list[MessageModel]]) -> dict:
        """Return messages grouped by chat id."""
        try:
            messages_by_chat = {
                chat: [m.to_message() for m in messages] for chat, messages in request.items()
            }
            grouped = group_messages_by_chat(messages_by_chat)
            return {chat: [asdict(m) for m in messages] for chat, messages in grouped.items()}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
