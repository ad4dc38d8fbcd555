from .analysis_service import generate_result, prepare_analysis, run_analysis, validate_resume_input
from .session import (
    AnalysisSession,
    SessionNotFoundError,
    SessionStateError,
    SessionStore,
    scan_session,
    session_store,
)

__all__ = [
    "run_analysis",
    "prepare_analysis",
    "generate_result",
    "validate_resume_input",
    "AnalysisSession",
    "SessionStore",
    "SessionStateError",
    "SessionNotFoundError",
    "scan_session",
    "session_store",
]
