"""AI chat schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str
    timestamp: datetime | None = None


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(min_length=1)
    model: str | None = None


class ChatReply(BaseModel):
    response: str
    messages: list[ChatMessage]
    fallback: bool = False


class EmergencyHelpRequest(BaseModel):
    situation: str = Field(default="User requested emergency help through the app", min_length=1)
    location: str | None = None


class EmergencyHelpResponse(BaseModel):
    response: str
    fallback: bool = False


class ModelsResponse(BaseModel):
    models: list[str]
