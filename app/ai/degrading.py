from __future__ import annotations

import asyncio
import json
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Literal, Sequence

from app.ai.fallbacks import pick_fallback
from app.ai.prompts import build_messages
from app.ai.types import AICapability, ChatMessage, TaskRole
from app.core.config import settings

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_TEXT = "I'm sorry, I couldn't generate a response."
KEY_PREFIX = "sk-"

_MAX_TOKENS: dict[str, int] = {
    "chat": 500,
    "persona": 500,
    "resume-suggestion": 200,
}


@dataclass(frozen=True)
class AITask:
    role: TaskRole
    prompt: str
    history: Sequence[ChatMessage] = field(default_factory=tuple)
    section: str | None = None


@dataclass(frozen=True)
class DegradationResult:
    kind: Literal["primary", "fallback"]
    text: str


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def capability_usable(capability: AICapability | None) -> bool:
    if capability is None:
        return False
    credential = (getattr(capability, "credential", "") or "").strip()
    if not credential or _looks_like_placeholder(credential):
        return False
    return credential.startswith(KEY_PREFIX)


def _fallback(task: AITask, rng: random.Random | None, reason: str, started: float) -> DegradationResult:
    logger.info(
        json.dumps(
            {
                "event": "ai_fallback",
                "role": task.role,
                "reason": reason,
                "duration_ms": int((time.perf_counter() - started) * 1000),
            }
        )
    )
    return DegradationResult(kind="fallback", text=pick_fallback(task.role, task.section, rng))


async def respond(
    task: AITask,
    capability: AICapability | None,
    *,
    rng: random.Random | None = None,
    timeout_s: float | None = None,
    temperature: float | None = None,
    history_window: int | None = None,
) -> DegradationResult:
    """Answer ``task`` through ``capability`` or a canned phrase; never raises.

    One attempt is made, bounded by ``timeout_s``. Missing or malformed
    credentials skip the attempt entirely.
    """
    started = time.perf_counter()
    try:
        if not capability_usable(capability):
            return _fallback(task, rng, "capability_unusable", started)

        messages = build_messages(
            task.role,
            task.prompt,
            task.history,
            history_window=settings.ai_history_window if history_window is None else history_window,
        )
        text = await asyncio.wait_for(
            capability.complete(
                messages,
                max_tokens=_MAX_TOKENS.get(task.role, 500),
                temperature=settings.ai_temperature if temperature is None else temperature,
            ),
            timeout=settings.ai_timeout_s if timeout_s is None else timeout_s,
        )
        if text is not None and not isinstance(text, str):
            raise TypeError(f"capability returned {type(text).__name__}, expected str")

        content = (text or "").strip()
        logger.info(
            json.dumps(
                {
                    "event": "ai_primary",
                    "role": task.role,
                    "history_len": len(messages) - 2,
                    "empty": not content,
                    "duration_ms": int((time.perf_counter() - started) * 1000),
                }
            )
        )
        return DegradationResult(kind="primary", text=content or EMPTY_RESPONSE_TEXT)
    except asyncio.TimeoutError:
        logger.warning("ai_call_timeout role=%s", task.role)
        return _fallback(task, rng, "timeout", started)
    except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
        logger.warning("ai_call_failed role=%s prompt_len=%s: %s", task.role, len(task.prompt or ""), exc)
        return _fallback(task, rng, "error", started)
