from .analysis import (
    AnalysisFailure,
    AnalysisOutcome,
    AnalysisResult,
    BulletPoint,
    LocalMetrics,
    MetricsRequest,
    ResumeInput,
)
from .session import SessionStep, SessionView

__all__ = [
    "ResumeInput",
    "MetricsRequest",
    "LocalMetrics",
    "BulletPoint",
    "AnalysisResult",
    "AnalysisFailure",
    "AnalysisOutcome",
    "SessionStep",
    "SessionView",
]
