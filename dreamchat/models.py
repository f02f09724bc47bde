"""Pydantic models for the transcript and the relay wire format."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["user", "assistant"]


class Message(BaseModel):
    """One entry in the conversation transcript."""

    model_config = ConfigDict(frozen=True)

    id: int
    author: Role
    text: str
    sentiment: float | None = None
    tags: tuple[str, ...] | None = None
    summary: str | None = None

    @property
    def is_user(self) -> bool:
        return self.author == "user"

    def to_chat_message(self) -> "ChatMessage":
        """Map to the role/content pair sent to the relay."""
        return ChatMessage(role=self.author, content=self.text)


class ChatMessage(BaseModel):
    """A single role/content pair in the relay request."""

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request model for the chat relay."""

    messages: list[ChatMessage]


class ChatResponse(BaseModel):
    """Successful relay response carrying the raw model text."""

    result: str


class ErrorResponse(BaseModel):
    """Relay failure body."""

    error: str


class HealthResponse(BaseModel):
    status: str
    model: str
