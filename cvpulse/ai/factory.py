from cvpulse.ai.config import load_ai_config
from cvpulse.ai.types import AIClient
from cvpulse.core.config import Settings

from cvpulse.ai.providers.openai_provider import OpenAIProvider
from cvpulse.ai.providers.gemini_provider import GeminiProvider


def get_ai_client(settings: Settings) -> AIClient:
    cfg = load_ai_config(settings)

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            temperature=cfg.temperature,
        )

    if cfg.provider == "gemini":
        return GeminiProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            temperature=cfg.temperature,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
