from __future__ import annotations

from fastapi import HTTPException, Request, status

from cvpulse.analysis.errors import AnalysisError
from cvpulse.analysis.generator import AnalysisGenerator
from cvpulse.services.session import SessionStore, session_store


def get_generator(request: Request) -> AnalysisGenerator:
    generator = getattr(request.app.state, "generator", None)
    if generator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Analysis service is not ready yet.",
        )
    return generator


def get_session_store(request: Request) -> SessionStore:
    return getattr(request.app.state, "sessions", None) or session_store


def raise_analysis_error(exc: AnalysisError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
