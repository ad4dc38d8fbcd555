from __future__ import annotations

import asyncio
import logging

from cvpulse.schemas.analysis import AnalysisResult, BulletPoint

logger = logging.getLogger(__name__)

MOCK_SCORE = 72
MOCK_SUMMARY = (
    "This candidate shows strong technical potential but lacks quantitative evidence. "
    "The structure is ATS-friendly, but the language is too passive "
    "(MOCK DATA - Add API Key to see real results)."
)
MOCK_BULLET_POINTS = (
    BulletPoint(
        original="Worked on a React project for a client.",
        improved=(
            "Architected a scalable React application for a Fortune 500 client, "
            "reducing page load time by 40%."
        ),
    ),
    BulletPoint(
        original="Responsible for managing a team.",
        improved=(
            "Spearheaded a cross-functional team of 10 engineers, "
            "delivering the Q4 roadmap 2 weeks ahead of schedule."
        ),
    ),
)
MOCK_SOFT_SKILLS = ("Communication", "Problem Solving")
MOCK_KEYWORDS_WITH_JD = ("Kubernetes", "CI/CD", "System Design")
MOCK_KEYWORDS_WITHOUT_JD = ("Leadership", "Optimization")


class MockGenerator:
    """Stand-in for the remote model used when no credential is configured."""

    mode = "mock"

    def __init__(self, latency_s: float = 1.5):
        self._latency_s = max(0.0, latency_s)

    async def generate(self, text: str, job_description: str | None = None) -> AnalysisResult:
        _ = text
        if self._latency_s:
            await asyncio.sleep(self._latency_s)

        has_jd = bool((job_description or "").strip())
        logger.info("mock_analysis_completed has_jd=%s", has_jd)
        return AnalysisResult(
            score=MOCK_SCORE,
            summary=MOCK_SUMMARY,
            bullet_points=list(MOCK_BULLET_POINTS),
            missing_keywords=list(MOCK_KEYWORDS_WITH_JD if has_jd else MOCK_KEYWORDS_WITHOUT_JD),
            soft_skills=list(MOCK_SOFT_SKILLS),
        )
