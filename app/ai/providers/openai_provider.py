from __future__ import annotations

import os
from typing import Optional, Sequence

from openai import AsyncOpenAI

from app.ai.types import ChatMessage


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 15.0,
        max_retries: int = 0,
    ):
        self._model = model
        self._api_key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        self._base_url = base_url or os.getenv("OPENAI_BASE_URL") or None
        self._timeout_s = float(os.getenv("OPENAI_TIMEOUT_S", str(timeout_s)))
        self._max_retries = max_retries
        self._client: AsyncOpenAI | None = None

    @property
    def credential(self) -> str:
        return self._api_key

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> AsyncOpenAI:
        # Built on first use so an unusable key never opens a connection pool.
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout_s,
                max_retries=self._max_retries,
            )
        return self._client

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        payload = [{"role": m.role, "content": m.content} for m in messages]

        response = await self._get_client().chat.completions.create(
            model=self._model,
            messages=payload,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content
