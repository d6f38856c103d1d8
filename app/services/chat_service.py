from datetime import datetime, timezone
import json
import logging
import time
from typing import Sequence

from app.ai.degrading import AITask, DegradationResult, respond
from app.ai.types import ChatMessage, TaskRole
from app.core.config import settings
from app.core.errors import ApiError
from app.core.hashing import short_hash
from app.core.state import AppState
from app.schemas.chat import AIChatRequest, AIChatResponse, ChatRequest, ChatResponse, HistoryMessage

logger = logging.getLogger("app.chat")


def _to_chat_messages(history: Sequence[HistoryMessage]) -> list[ChatMessage]:
    return [ChatMessage(role=m.role, content=m.content) for m in history]


def _split_messages(messages: Sequence[HistoryMessage]) -> tuple[str, list[HistoryMessage]]:
    """Last user turn becomes the prompt; everything before it is history."""
    for index in range(len(messages) - 1, -1, -1):
        msg = messages[index]
        if msg.role == "user" and msg.content.strip():
            return msg.content.strip(), list(messages[:index])
    return "", []


async def _answer(
    state: AppState,
    role: TaskRole,
    message: str,
    history: Sequence[HistoryMessage],
) -> DegradationResult:
    started_at = time.perf_counter()
    result = await respond(
        AITask(role=role, prompt=message, history=_to_chat_messages(history)),
        state.capability,
        rng=state.rng,
    )
    logger.info(
        json.dumps(
            {
                "event": "chat_complete",
                "role": role,
                "kind": result.kind,
                "history_len": len(history),
                "message_len": len(message),
                "message_hash": short_hash(message[: settings.log_message_max_chars]),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return result


async def persona_chat(state: AppState, payload: ChatRequest) -> ChatResponse:
    message = payload.message.strip()
    if not message:
        raise ApiError("Message is required")
    result = await _answer(state, "persona", message, payload.conversation_history)
    return ChatResponse(response=result.text)


async def assistant_chat(state: AppState, payload: AIChatRequest) -> AIChatResponse:
    if payload.messages:
        message, history = _split_messages(payload.messages)
    else:
        message, history = payload.message.strip(), list(payload.conversation_history)
    if not message:
        raise ApiError("No message content found")

    result = await _answer(state, "chat", message, history)
    return AIChatResponse(
        response=result.text,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
