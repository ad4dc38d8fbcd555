import asyncio
import sys
import unittest
from datetime import timedelta
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvpulse.analysis.errors import RemoteCallError, ResumeValidationError  # noqa: E402
from cvpulse.analysis.metrics import compute_metrics  # noqa: E402
from cvpulse.analysis.mock import MockGenerator  # noqa: E402
from cvpulse.schemas.analysis import AnalysisFailure, AnalysisResult, ResumeInput  # noqa: E402
from cvpulse.schemas.session import SessionStep  # noqa: E402
from cvpulse.services.session import (  # noqa: E402
    AnalysisSession,
    SessionNotFoundError,
    SessionStateError,
    SessionStore,
    scan_session,
)

RESUME = (
    "Data Engineer. Engineered streaming pipelines processing 2M events per day. "
    "Worked with analysts on dashboards."
)


def _result(score: int, summary: str) -> AnalysisResult:
    return AnalysisResult(score=score, summary=summary, bullet_points=[], missing_keywords=[], soft_skills=[])


class GatedGenerator:
    """Blocks inside generate() until the test releases it."""

    mode = "remote"

    def __init__(self, error: Exception | None = None):
        self.gate = asyncio.Event()
        self.started = asyncio.Event()
        self.error = error

    async def generate(self, text, job_description=None):
        self.started.set()
        await self.gate.wait()
        if self.error is not None:
            raise self.error
        return _result(score=90, summary="Great.")


class SessionStateMachineTests(unittest.TestCase):
    def setUp(self):
        self.session = AnalysisSession(session_id="s-1")
        self.payload = ResumeInput(text=RESUME)
        self.metrics = compute_metrics(RESUME)

    def test_submit_then_resolve_reaches_report(self):
        generation = self.session.submit(self.payload, self.metrics)
        self.assertEqual(self.session.step, SessionStep.ANALYZING)
        self.assertEqual(self.session.metrics, self.metrics)

        applied = self.session.resolve(generation, _result(score=50, summary="ok"))
        self.assertTrue(applied)
        self.assertEqual(self.session.step, SessionStep.REPORT)
        self.assertEqual(self.session.result.score, 50)

    def test_failure_moves_to_failed_and_allows_resubmit(self):
        generation = self.session.submit(self.payload, self.metrics)
        self.session.resolve(generation, AnalysisFailure(code="remote_call_failed", message="down"))
        self.assertEqual(self.session.step, SessionStep.FAILED)
        self.assertIsNone(self.session.result)
        self.assertIsNotNone(self.session.metrics)

        second = self.session.submit(self.payload, self.metrics)
        self.assertEqual(second, generation + 1)
        self.assertIsNone(self.session.error)

    def test_cannot_submit_while_analyzing_or_from_report(self):
        generation = self.session.submit(self.payload, self.metrics)
        with self.assertRaises(SessionStateError):
            self.session.submit(self.payload, self.metrics)

        self.session.resolve(generation, _result(score=50, summary="ok"))
        with self.assertRaises(SessionStateError) as ctx:
            self.session.submit(self.payload, self.metrics)
        self.assertEqual(ctx.exception.status_code, 409)

    def test_reset_discards_late_result(self):
        generation = self.session.submit(self.payload, self.metrics)
        self.session.reset()

        applied = self.session.resolve(generation, _result(score=99, summary="late"))
        self.assertFalse(applied)
        self.assertEqual(self.session.step, SessionStep.INPUT)
        self.assertIsNone(self.session.result)
        self.assertIsNone(self.session.metrics)

    def test_older_generation_cannot_overwrite_newer_submission(self):
        first = self.session.submit(self.payload, self.metrics)
        self.session.reset()
        second = self.session.submit(self.payload, self.metrics)

        self.assertFalse(self.session.resolve(first, _result(score=10, summary="old")))
        self.assertEqual(self.session.step, SessionStep.ANALYZING)
        self.assertTrue(self.session.resolve(second, _result(score=88, summary="new")))
        self.assertEqual(self.session.result.score, 88)


class SessionStoreTests(unittest.TestCase):
    def test_create_and_get(self):
        store = SessionStore(ttl_s=60)
        session = store.create()
        self.assertIs(store.get(session.session_id), session)
        self.assertEqual(len(store), 1)

    def test_unknown_session(self):
        with self.assertRaises(SessionNotFoundError):
            SessionStore(ttl_s=60).get("missing")

    def test_idle_sessions_expire(self):
        store = SessionStore(ttl_s=60)
        session = store.create()
        session.updated_at = session.updated_at - timedelta(seconds=120)
        with self.assertRaises(SessionNotFoundError):
            store.get(session.session_id)


class ScanSessionTests(unittest.IsolatedAsyncioTestCase):
    async def test_mock_scan_reaches_report(self):
        session = AnalysisSession(session_id="s-2")
        view = await scan_session(session, ResumeInput(text=RESUME), MockGenerator(latency_s=0))
        self.assertEqual(view.step, SessionStep.REPORT)
        self.assertEqual(view.mode, "mock")
        self.assertEqual(view.result.score, 72)
        self.assertIsNotNone(view.metrics)

    async def test_short_text_leaves_session_untouched(self):
        session = AnalysisSession(session_id="s-3")
        with self.assertRaises(ResumeValidationError):
            await scan_session(session, ResumeInput(text="too short"), MockGenerator(latency_s=0))
        self.assertEqual(session.step, SessionStep.INPUT)
        self.assertEqual(session.generation, 0)

    async def test_remote_failure_reaches_failed_state(self):
        session = AnalysisSession(session_id="s-4")
        generator = GatedGenerator(error=RemoteCallError("down"))
        generator.gate.set()
        view = await scan_session(session, ResumeInput(text=RESUME), generator)
        self.assertEqual(view.step, SessionStep.FAILED)
        self.assertEqual(view.error.code, "remote_call_failed")
        self.assertIsNone(view.result)
        self.assertIsNotNone(view.metrics)

    async def test_reset_during_analysis_drops_result(self):
        session = AnalysisSession(session_id="s-5")
        generator = GatedGenerator()
        task = asyncio.create_task(scan_session(session, ResumeInput(text=RESUME), generator))
        await generator.started.wait()

        self.assertEqual(session.step, SessionStep.ANALYZING)
        with self.assertRaises(SessionStateError):
            await scan_session(session, ResumeInput(text=RESUME), generator)

        session.reset()
        generator.gate.set()
        view = await task

        self.assertEqual(view.step, SessionStep.INPUT)
        self.assertIsNone(view.result)
        self.assertIsNone(session.result)


if __name__ == "__main__":
    unittest.main()
