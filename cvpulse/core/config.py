from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_PROVIDER_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


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


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def _resolve_api_key(provider: str) -> str | None:
    raw = _get_env("AI_API_KEY") or _get_env(_PROVIDER_KEY_ENV.get(provider, "OPENAI_API_KEY"))
    if raw is None:
        return None
    key = raw.strip()
    if not key or _looks_like_placeholder(key):
        return None
    return key


@dataclass(frozen=True)
class Settings:
    ai_provider: str
    ai_model: str | None
    ai_api_key: str | None
    ai_base_url: str | None
    ai_timeout_s: float
    ai_temperature: float
    min_resume_chars: int
    mock_latency_s: float
    session_ttl_s: int
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]

    @property
    def has_credential(self) -> bool:
        return bool(self.ai_api_key)


def load_settings() -> Settings:
    provider = (_get_env("AI_PROVIDER", "openai") or "openai").strip().lower()
    return Settings(
        ai_provider=provider,
        ai_model=(_get_env("AI_MODEL") or "").strip() or None,
        ai_api_key=_resolve_api_key(provider),
        ai_base_url=(_get_env("AI_BASE_URL") or "").strip() or None,
        ai_timeout_s=_get_env_float("AI_TIMEOUT_S", 30.0),
        ai_temperature=_get_env_float("AI_TEMPERATURE", 0.2),
        min_resume_chars=_get_env_int("MIN_RESUME_CHARS", 50),
        mock_latency_s=max(0.0, _get_env_float("MOCK_LATENCY_S", 1.5)),
        session_ttl_s=_get_env_int("SESSION_TTL_S", 3600),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:5173",
                "http://127.0.0.1:5173",
                "http://localhost:3000",
            ],
        ),
    )


settings = load_settings()

if settings.min_resume_chars < 1:
    raise RuntimeError("MIN_RESUME_CHARS must be a positive integer.")
