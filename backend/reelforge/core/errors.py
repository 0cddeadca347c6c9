"""
Pipeline error taxonomy.

Each error carries the HTTP status it maps to and a user-facing message that
is safe to return to the client. Diagnostic detail stays in ``detail`` and is
only ever logged.
"""

from typing import Optional

from ..config.constants import (
    MSG_INTERNAL_ERROR,
    MSG_LLM_CALL_FAILED,
    MSG_LLM_NOT_CONFIGURED,
    MSG_SCRIPT_PARSE_FAILED,
)


class PipelineError(Exception):
    """Base class for errors surfaced through the response envelope."""

    status_code: int = 500
    default_message: str = MSG_INTERNAL_ERROR

    def __init__(self, public_message: Optional[str] = None, *, detail: Optional[str] = None):
        self.public_message = public_message or self.default_message
        self.detail = detail
        super().__init__(detail or self.public_message)


class ValidationError(PipelineError):
    """Required user input is missing or malformed."""
    status_code = 400


class UpstreamConfigError(PipelineError):
    """A provider credential is missing."""
    status_code = 500
    default_message = MSG_LLM_NOT_CONFIGURED


class UpstreamCallError(PipelineError):
    """A provider answered with a non-2xx status or the transport failed."""
    status_code = 500
    default_message = MSG_LLM_CALL_FAILED


class ParseError(PipelineError):
    """Model output could not be turned into the expected structure."""
    status_code = 500
    default_message = MSG_SCRIPT_PARSE_FAILED


__all__ = [
    "PipelineError",
    "ValidationError",
    "UpstreamConfigError",
    "UpstreamCallError",
    "ParseError",
]
