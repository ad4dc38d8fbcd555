from __future__ import annotations


class AnalysisError(RuntimeError):
    code = "analysis_failed"
    status_code = 500

    def __init__(self, message: str, *, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class ResumeValidationError(AnalysisError):
    """Input rejected before any metrics or generation work happens."""

    code = "input_too_short"
    status_code = 422


class GenerationError(AnalysisError):
    """A remote analysis call produced no usable result."""

    code = "generation_failed"
    status_code = 502


class RemoteCallError(GenerationError):
    code = "remote_call_failed"


class ResponseShapeError(GenerationError):
    code = "invalid_response"
