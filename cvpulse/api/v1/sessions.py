from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from cvpulse.analysis.errors import AnalysisError
from cvpulse.analysis.generator import AnalysisGenerator
from cvpulse.api.deps import get_generator, get_session_store, raise_analysis_error
from cvpulse.core.rate_limit import rate_limit
from cvpulse.schemas.analysis import ResumeInput
from cvpulse.schemas.session import SessionView
from cvpulse.services.session import SessionStore, scan_session

router = APIRouter()


@router.post("/sessions", response_model=SessionView, status_code=status.HTTP_201_CREATED)
@rate_limit()
async def create_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
    generator: AnalysisGenerator = Depends(get_generator),
):
    _ = request
    return store.create().view(generator.mode)


@router.get("/sessions/{session_id}", response_model=SessionView)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
    generator: AnalysisGenerator = Depends(get_generator),
):
    try:
        return store.get(session_id).view(generator.mode)
    except AnalysisError as exc:
        raise_analysis_error(exc)


@router.post("/sessions/{session_id}/scan", response_model=SessionView)
@rate_limit()
async def scan(
    request: Request,
    session_id: str,
    payload: ResumeInput,
    store: SessionStore = Depends(get_session_store),
    generator: AnalysisGenerator = Depends(get_generator),
):
    _ = request
    try:
        session = store.get(session_id)
        return await scan_session(session, payload, generator)
    except AnalysisError as exc:
        raise_analysis_error(exc)


@router.post("/sessions/{session_id}/reset", response_model=SessionView)
async def reset_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
    generator: AnalysisGenerator = Depends(get_generator),
):
    try:
        session = store.get(session_id)
    except AnalysisError as exc:
        raise_analysis_error(exc)
    session.reset()
    return session.view(generator.mode)
