from __future__ import annotations

import logging
from typing import Protocol

from cvpulse.ai.factory import get_ai_client
from cvpulse.analysis.mock import MockGenerator
from cvpulse.analysis.remote import RemoteGenerator
from cvpulse.core.config import Settings
from cvpulse.schemas.analysis import AnalysisResult, GenerationMode

logger = logging.getLogger(__name__)


class AnalysisGenerator(Protocol):
    mode: GenerationMode

    async def generate(self, text: str, job_description: str | None = None) -> AnalysisResult: ...


def select_generator(settings: Settings) -> AnalysisGenerator:
    """Pick the remote or mock generator once, from credential presence alone."""
    if settings.has_credential:
        client = get_ai_client(settings)
        logger.info("analysis_generator_selected mode=remote provider=%s", settings.ai_provider)
        return RemoteGenerator(client)

    logger.info("analysis_generator_selected mode=mock reason=no_credential")
    return MockGenerator(latency_s=settings.mock_latency_s)
