from dataclasses import dataclass

from app.core.config import Settings, settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str
    base_url: str | None
    timeout_s: float


def load_ai_config(source: Settings | None = None) -> AIConfig:
    cfg = source or settings
    return AIConfig(
        provider=cfg.ai_provider,
        model=cfg.ai_model,
        api_key=(cfg.openai_api_key or "").strip(),
        base_url=cfg.openai_base_url,
        timeout_s=cfg.ai_timeout_s,
    )
