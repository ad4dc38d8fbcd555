from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

GenerationMode = Literal["remote", "mock"]
BrevityScore = Literal[40, 80, 100]

TOP_CANDIDATE_THRESHOLD = 75


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ResumeInput(WireModel):
    text: str = Field(max_length=120000)
    job_description: str = Field(default="", max_length=120000)

    @field_validator("job_description", mode="before")
    @classmethod
    def _null_job_description(cls, value: object) -> object:
        return "" if value is None else value


class MetricsRequest(WireModel):
    text: str = Field(min_length=1, max_length=120000)


class LocalMetrics(WireModel):
    word_count: int = Field(ge=0)
    impact_score: int = Field(ge=0, le=100)
    verb_score: int = Field(ge=0, le=100)
    brevity_score: BrevityScore


class BulletPoint(WireModel):
    original: str
    improved: str


def _unique(values: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        item = value.strip()
        if not item or item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out


class AnalysisResult(WireModel):
    score: int = Field(ge=0, le=100)
    summary: str
    bullet_points: list[BulletPoint]
    missing_keywords: list[str]
    soft_skills: list[str]

    @field_validator("missing_keywords", "soft_skills")
    @classmethod
    def _dedupe(cls, value: list[str]) -> list[str]:
        return _unique(value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def verdict(self) -> str:
        if self.score > TOP_CANDIDATE_THRESHOLD:
            return "Top 20% of Candidates"
        return "Needs Improvement"


class AnalysisFailure(WireModel):
    code: str
    message: str


class AnalysisOutcome(WireModel):
    metrics: LocalMetrics
    result: AnalysisResult | None = None
    error: AnalysisFailure | None = None
    mode: GenerationMode
