from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PERSONA_NAME = "Rishik Muthyala"


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None
    openai_base_url: str | None
    ai_provider: str
    ai_model: str
    ai_temperature: float
    ai_timeout_s: float
    ai_history_window: int
    persona_name: str
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    log_message_max_chars: int
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    contact_email: str
    smtp_host: str | None
    smtp_port: int
    smtp_user: str | None
    smtp_password: str | None
    smtp_from: str | None
    smtp_use_tls: bool
    admin_notify_email: str | None


def load_settings() -> Settings:
    return Settings(
        openai_api_key=_get_env("OPENAI_API_KEY"),
        openai_base_url=_get_env("OPENAI_BASE_URL"),
        ai_provider=(_get_env("AI_PROVIDER", "openai") or "openai").strip().lower(),
        ai_model=(_get_env("AI_MODEL", "gpt-4o-mini") or "gpt-4o-mini").strip(),
        ai_temperature=_get_env_float("AI_TEMPERATURE", 0.7),
        ai_timeout_s=_get_env_float("AI_TIMEOUT_S", 15.0),
        ai_history_window=_get_env_int("AI_HISTORY_WINDOW", 10),
        persona_name=(_get_env("PERSONA_NAME") or "").strip() or DEFAULT_PERSONA_NAME,
        rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        log_message_max_chars=_get_env_int("LOG_MESSAGE_MAX_CHARS", 800),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:3000",
                "http://127.0.0.1:3000",
                "http://[::1]:3000",
            ],
        ),
        cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX", r"^https:\/\/[a-z0-9-]+-.*\.vercel\.app$"),
        cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
        contact_email=_get_env("CONTACT_EMAIL", "rishikmuthyala05@gmail.com") or "rishikmuthyala05@gmail.com",
        smtp_host=_get_env("SMTP_HOST"),
        smtp_port=_get_env_int("SMTP_PORT", 587),
        smtp_user=_get_env("SMTP_USER"),
        smtp_password=_get_env("SMTP_PASSWORD"),
        smtp_from=_get_env("SMTP_FROM"),
        smtp_use_tls=_get_env_bool("SMTP_USE_TLS", True),
        admin_notify_email=_get_env("ADMIN_NOTIFY_EMAIL"),
    )


settings = load_settings()

if settings.ai_provider not in {"openai"}:
    raise RuntimeError("AI_PROVIDER must be 'openai'.")

__all__ = ["Settings", "load_settings", "settings"]
