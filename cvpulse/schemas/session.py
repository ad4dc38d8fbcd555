from __future__ import annotations

from datetime import datetime
from enum import Enum

from .analysis import AnalysisFailure, AnalysisResult, GenerationMode, LocalMetrics, WireModel


class SessionStep(str, Enum):
    INPUT = "input"
    ANALYZING = "analyzing"
    REPORT = "report"
    FAILED = "failed"


class SessionView(WireModel):
    session_id: str
    step: SessionStep
    generation: int
    mode: GenerationMode
    metrics: LocalMetrics | None = None
    result: AnalysisResult | None = None
    error: AnalysisFailure | None = None
    updated_at: datetime
