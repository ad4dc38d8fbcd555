from .errors import (
    AnalysisError,
    GenerationError,
    RemoteCallError,
    ResponseShapeError,
    ResumeValidationError,
)
from .generator import AnalysisGenerator, select_generator
from .metrics import compute_metrics
from .mock import MockGenerator
from .remote import RemoteGenerator, parse_analysis_response

__all__ = [
    "AnalysisError",
    "GenerationError",
    "RemoteCallError",
    "ResponseShapeError",
    "ResumeValidationError",
    "AnalysisGenerator",
    "select_generator",
    "compute_metrics",
    "MockGenerator",
    "RemoteGenerator",
    "parse_analysis_response",
]
