"""
Shared error handling for SurahKit.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel
from opentelemetry import trace


class ErrorResponse(BaseModel):
    """Standard error response format."""

    trace_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class SurahKitException(Exception):
    """Base exception for SurahKit."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        # Get trace ID from current span
        trace_id = None
        current_span = trace.get_current_span()
        if current_span and current_span.is_recording():
            span_context = current_span.get_span_context()
            if span_context.trace_id != 0:
                trace_id = f"{span_context.trace_id:032x}"

        return ErrorResponse(
            trace_id=trace_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class InvalidInputError(SurahKitException):
    """A required argument was empty or missing."""

    def __init__(self, message: str = "Invalid input", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_INPUT", message, details)


class RetrievalError(SurahKitException):
    """A partition could not be fetched or parsed."""

    def __init__(
        self,
        key: str,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.key = key
        self.status_code = status_code
        self.detail = detail

        details: Dict[str, Any] = {"key": key}
        if status_code is not None:
            details["status_code"] = status_code
        if detail:
            details["detail"] = detail

        super().__init__(
            "RETRIEVAL_ERROR",
            message or f"Failed to retrieve language file '{key}'.",
            details,
        )


class NotFoundError(SurahKitException):
    """No record matched a lookup by id."""

    def __init__(self, language: str, record_id: Any):
        self.language = language
        self.record_id = record_id
        super().__init__(
            "NOT_FOUND",
            f"Surah with ID '{record_id}' not found in '{language}'.",
            {"language": language, "id": str(record_id)},
        )
