from dataclasses import dataclass
from typing import Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]
TaskRole = Literal["chat", "persona", "resume-suggestion"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class AICapability(Protocol):
    """Anything that can turn a message list into a single text completion."""

    @property
    def credential(self) -> str: ...

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        max_tokens: int,
        temperature: float,
    ) -> str | None: ...
