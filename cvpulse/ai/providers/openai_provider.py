from __future__ import annotations

import logging
from typing import Optional, Sequence

from openai import AsyncOpenAI, OpenAIError

from cvpulse.ai.exceptions import ProviderError
from cvpulse.ai.types import ChatMessage

logger = logging.getLogger(__name__)


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: str,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        temperature: float = 0.2,
        json_mode: bool = True,
    ):
        key = (api_key or "").strip()
        if not key:
            raise RuntimeError("AI_API_KEY is missing")

        self._model = model
        self._temperature = temperature
        self._json_mode = json_mode
        # one attempt per call; a failed analysis is resubmitted by the user
        self._client = AsyncOpenAI(
            api_key=key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        payload = [{"role": m.role, "content": m.content} for m in messages]

        create_kwargs = {
            "model": self._model,
            "messages": payload,
            "temperature": self._temperature,
        }
        if self._json_mode:
            create_kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(**create_kwargs)
        except OpenAIError as exc:
            logger.warning("openai_completion_failed model=%s: %s", self._model, exc)
            raise ProviderError(f"{type(exc).__name__}: {exc}") from exc

        content = response.choices[0].message.content if response.choices else ""
        return content or ""
