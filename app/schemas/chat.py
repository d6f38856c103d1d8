from __future__ import annotations

from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel


class HistoryMessage(CamelModel):
    role: Literal["system", "user", "assistant"] = "user"
    content: str = Field(default="", max_length=8000)


class ChatRequest(CamelModel):
    message: str = Field(default="", max_length=4000)
    conversation_history: list[HistoryMessage] = Field(
        default_factory=list, alias="conversationHistory", max_length=200
    )


class AIChatRequest(ChatRequest):
    messages: list[HistoryMessage] | None = Field(default=None, max_length=200)


class ChatResponse(CamelModel):
    success: bool = True
    response: str


class AIChatResponse(ChatResponse):
    timestamp: str
