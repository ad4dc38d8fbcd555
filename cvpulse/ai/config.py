from dataclasses import dataclass

from cvpulse.core.config import Settings

_DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "gemini": "gemini-1.5-flash",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str
    base_url: str | None
    timeout_s: float
    temperature: float


def load_ai_config(cfg: Settings) -> AIConfig:
    if not cfg.ai_api_key:
        raise RuntimeError("AI credential is missing; set AI_API_KEY to enable remote analysis.")
    model = cfg.ai_model or _DEFAULT_MODELS.get(cfg.ai_provider, "")
    return AIConfig(
        provider=cfg.ai_provider,
        model=model,
        api_key=cfg.ai_api_key,
        base_url=cfg.ai_base_url,
        timeout_s=cfg.ai_timeout_s,
        temperature=cfg.ai_temperature,
    )
