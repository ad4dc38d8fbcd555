from __future__ import annotations

import logging
import time

from cvpulse.analysis.errors import GenerationError, ResumeValidationError
from cvpulse.analysis.generator import AnalysisGenerator
from cvpulse.analysis.metrics import compute_metrics
from cvpulse.core.config import settings
from cvpulse.schemas.analysis import (
    AnalysisFailure,
    AnalysisOutcome,
    AnalysisResult,
    LocalMetrics,
    ResumeInput,
)

logger = logging.getLogger("cvpulse.analysis")


def validate_resume_input(payload: ResumeInput, *, min_chars: int | None = None) -> None:
    minimum = settings.min_resume_chars if min_chars is None else min_chars
    if len(payload.text) < minimum:
        raise ResumeValidationError(
            f"Please enter a longer resume text (at least {minimum} characters)."
        )


def prepare_analysis(payload: ResumeInput, *, min_chars: int | None = None) -> LocalMetrics:
    """Validate the submission and compute its local metrics synchronously."""
    validate_resume_input(payload, min_chars=min_chars)
    metrics = compute_metrics(payload.text)
    if metrics is None:  # pragma: no cover - validation rejects empty text first
        raise ResumeValidationError("Please enter your resume text.")
    return metrics


async def generate_result(
    payload: ResumeInput, generator: AnalysisGenerator
) -> AnalysisResult | AnalysisFailure:
    started = time.perf_counter()
    try:
        result = await generator.generate(payload.text, payload.job_description)
    except GenerationError as exc:
        logger.warning(
            "analysis_generation_failed mode=%s code=%s latency_ms=%s",
            generator.mode,
            exc.code,
            int((time.perf_counter() - started) * 1000),
        )
        return AnalysisFailure(code=exc.code, message=str(exc))

    logger.info(
        "analysis_completed mode=%s score=%s latency_ms=%s",
        generator.mode,
        result.score,
        int((time.perf_counter() - started) * 1000),
    )
    return result


async def run_analysis(
    payload: ResumeInput,
    generator: AnalysisGenerator,
    *,
    min_chars: int | None = None,
) -> AnalysisOutcome:
    """Score a resume locally, then await exactly one generator call.

    Raises ResumeValidationError for short input. Generation failures do not
    raise; they come back in ``AnalysisOutcome.error`` next to the metrics.
    """
    metrics = prepare_analysis(payload, min_chars=min_chars)
    logger.info(
        "analysis_started mode=%s resume_len=%s has_jd=%s",
        generator.mode,
        len(payload.text),
        bool(payload.job_description.strip()),
    )

    generated = await generate_result(payload, generator)
    if isinstance(generated, AnalysisFailure):
        return AnalysisOutcome(metrics=metrics, error=generated, mode=generator.mode)
    return AnalysisOutcome(metrics=metrics, result=generated, mode=generator.mode)
