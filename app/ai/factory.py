import logging

from app.ai.config import AIConfig, load_ai_config
from app.ai.types import AICapability

from app.ai.providers.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)


def get_ai_capability(cfg: AIConfig | None = None) -> AICapability | None:
    cfg = cfg or load_ai_config()

    if not cfg.api_key:
        logger.info("ai_capability_absent provider=%s", cfg.provider)
        return None

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
