"""Per-user scan sessions: Input -> Analyzing -> Report (or Failed), reset back to Input.

Each submission bumps the session's generation id. A generator result is only
applied when it carries the current id, so a result that arrives after a reset
(or after a newer submission) is dropped instead of overwriting newer state.
"""

from __future__ import annotations

import logging
import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from cvpulse.analysis.errors import AnalysisError
from cvpulse.analysis.generator import AnalysisGenerator
from cvpulse.core.config import settings
from cvpulse.schemas.analysis import (
    AnalysisFailure,
    AnalysisResult,
    GenerationMode,
    LocalMetrics,
    ResumeInput,
)
from cvpulse.schemas.session import SessionStep, SessionView
from cvpulse.services.analysis_service import generate_result, prepare_analysis

logger = logging.getLogger("cvpulse.session")

_SUBMITTABLE_STEPS = {SessionStep.INPUT, SessionStep.FAILED}


class SessionStateError(AnalysisError):
    code = "invalid_session_state"
    status_code = 409


class SessionNotFoundError(AnalysisError):
    code = "session_not_found"
    status_code = 404


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AnalysisSession:
    session_id: str
    step: SessionStep = SessionStep.INPUT
    generation: int = 0
    input: ResumeInput | None = None
    metrics: LocalMetrics | None = None
    result: AnalysisResult | None = None
    error: AnalysisFailure | None = None
    updated_at: datetime = field(default_factory=_utc_now)

    def _touch(self) -> None:
        self.updated_at = _utc_now()

    def submit(self, payload: ResumeInput, metrics: LocalMetrics) -> int:
        if self.step not in _SUBMITTABLE_STEPS:
            raise SessionStateError(
                f"Cannot start a scan while the session is in '{self.step.value}'. Start a new scan first."
            )
        self.generation += 1
        self.step = SessionStep.ANALYZING
        self.input = payload
        self.metrics = metrics
        self.result = None
        self.error = None
        self._touch()
        return self.generation

    def resolve(self, generation: int, outcome: AnalysisResult | AnalysisFailure) -> bool:
        if generation != self.generation or self.step is not SessionStep.ANALYZING:
            logger.info(
                "session_stale_result_dropped session=%s generation=%s current=%s",
                self.session_id,
                generation,
                self.generation,
            )
            return False
        if isinstance(outcome, AnalysisFailure):
            self.error = outcome
            self.step = SessionStep.FAILED
        else:
            self.result = outcome
            self.step = SessionStep.REPORT
        self._touch()
        return True

    def reset(self) -> None:
        self.generation += 1
        self.step = SessionStep.INPUT
        self.input = None
        self.metrics = None
        self.result = None
        self.error = None
        self._touch()

    def view(self, mode: GenerationMode) -> SessionView:
        return SessionView(
            session_id=self.session_id,
            step=self.step,
            generation=self.generation,
            mode=mode,
            metrics=self.metrics,
            result=self.result,
            error=self.error,
            updated_at=self.updated_at,
        )


class SessionStore:
    """In-memory session registry; sessions idle longer than the TTL are purged."""

    def __init__(self, ttl_s: int | None = None):
        self._ttl = timedelta(seconds=max(1, settings.session_ttl_s if ttl_s is None else ttl_s))
        self._sessions: dict[str, AnalysisSession] = {}
        self._lock = threading.Lock()

    def _purge_expired(self) -> None:
        cutoff = _utc_now() - self._ttl
        expired = [
            sid
            for sid, session in self._sessions.items()
            if session.updated_at <= cutoff and session.step is not SessionStep.ANALYZING
        ]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("session_purge deleted=%s", len(expired))

    def create(self) -> AnalysisSession:
        session = AnalysisSession(session_id=secrets.token_urlsafe(12))
        with self._lock:
            self._purge_expired()
            self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> AnalysisSession:
        with self._lock:
            self._purge_expired()
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError("Scan session not found or expired.")
        return session

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


async def scan_session(
    session: AnalysisSession,
    payload: ResumeInput,
    generator: AnalysisGenerator,
    *,
    min_chars: int | None = None,
) -> SessionView:
    metrics = prepare_analysis(payload, min_chars=min_chars)
    generation = session.submit(payload, metrics)
    logger.info(
        "session_scan_started session=%s generation=%s mode=%s",
        session.session_id,
        generation,
        generator.mode,
    )
    outcome = await generate_result(payload, generator)
    session.resolve(generation, outcome)
    return session.view(generator.mode)


session_store = SessionStore()
