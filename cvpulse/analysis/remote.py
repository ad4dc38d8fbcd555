from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from cvpulse.ai.types import AIClient
from cvpulse.analysis.errors import RemoteCallError, ResponseShapeError
from cvpulse.analysis.prompt import build_analysis_messages
from cvpulse.schemas.analysis import AnalysisResult

logger = logging.getLogger(__name__)

_LEADING_FENCE_RE = re.compile(r"^\s*```[a-zA-Z0-9_-]*\s*")
_TRAILING_FENCE_RE = re.compile(r"\s*```\s*$")


@dataclass(frozen=True)
class ParseSuccess:
    result: AnalysisResult


@dataclass(frozen=True)
class ParseFailure:
    reason: str


ParseOutcome = Union[ParseSuccess, ParseFailure]


def strip_code_fences(raw: str) -> str:
    text = _LEADING_FENCE_RE.sub("", raw.strip(), count=1)
    return _TRAILING_FENCE_RE.sub("", text, count=1).strip()


def extract_json_object(raw: str) -> str:
    """Return the outermost ``{...}`` span, tolerating prose around it."""
    text = strip_code_fences(raw)
    if text.startswith(("{", "[")):
        return text
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return text
    return strip_code_fences(text[start : end + 1])


def _summarize_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors()[:3]:
        loc = ".".join(str(item) for item in err.get("loc", ()))
        parts.append(f"{loc or '<root>'}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def parse_analysis_response(raw: str | None) -> ParseOutcome:
    if not raw or not raw.strip():
        return ParseFailure("empty response")

    payload_text = extract_json_object(raw)
    try:
        payload: Any = json.loads(payload_text)
    except json.JSONDecodeError as exc:
        return ParseFailure(f"response is not valid JSON ({exc.msg})")

    if not isinstance(payload, dict):
        return ParseFailure(f"expected a JSON object, got {type(payload).__name__}")

    try:
        return ParseSuccess(AnalysisResult.model_validate(payload))
    except ValidationError as exc:
        return ParseFailure(f"response does not match the analysis schema ({_summarize_validation_error(exc)})")


class RemoteGenerator:
    mode = "remote"

    def __init__(self, client: AIClient):
        self._client = client

    async def generate(self, text: str, job_description: str | None = None) -> AnalysisResult:
        messages = build_analysis_messages(text, job_description)
        started = time.perf_counter()
        try:
            raw = await self._client.complete(messages)
        except Exception as exc:  # noqa: BLE001 - client errors surface as RemoteCallError
            logger.warning(
                "remote_analysis_call_failed resume_len=%s latency_ms=%s error=%s: %s",
                len(text),
                int((time.perf_counter() - started) * 1000),
                type(exc).__name__,
                exc,
            )
            raise RemoteCallError("The analysis service could not be reached. Please try again.") from exc

        outcome = parse_analysis_response(raw)
        latency_ms = int((time.perf_counter() - started) * 1000)
        if isinstance(outcome, ParseFailure):
            logger.warning(
                "remote_analysis_invalid_response response_len=%s latency_ms=%s: %s",
                len(raw or ""),
                latency_ms,
                outcome.reason,
            )
            raise ResponseShapeError("The analysis service returned an unreadable response. Please try again.")

        logger.info("remote_analysis_completed score=%s latency_ms=%s", outcome.result.score, latency_ms)
        return outcome.result
