from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from cvpulse.analysis.errors import ResumeValidationError
from cvpulse.analysis.generator import AnalysisGenerator
from cvpulse.analysis.metrics import compute_metrics
from cvpulse.api.deps import get_generator, raise_analysis_error
from cvpulse.core.rate_limit import rate_limit
from cvpulse.schemas.analysis import AnalysisOutcome, LocalMetrics, MetricsRequest, ResumeInput
from cvpulse.services.analysis_service import run_analysis

router = APIRouter()


@router.post("/metrics", response_model=LocalMetrics)
@rate_limit()
async def resume_metrics(request: Request, payload: MetricsRequest):
    _ = request
    metrics = compute_metrics(payload.text)
    if metrics is None:
        raise_analysis_error(ResumeValidationError("Please enter your resume text."))
    return metrics


@router.post("/analyze", response_model=AnalysisOutcome)
@rate_limit()
async def analyze_resume(
    request: Request,
    payload: ResumeInput,
    generator: AnalysisGenerator = Depends(get_generator),
):
    _ = request
    try:
        return await run_analysis(payload, generator)
    except ResumeValidationError as exc:
        raise_analysis_error(exc)
