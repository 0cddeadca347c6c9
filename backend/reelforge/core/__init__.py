"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - errors.py: Pipeline error taxonomy mapped to the response envelope
    - session.py: Cookie-backed session context

Usage:
    from reelforge.core import get_logger, ValidationError, SessionContext
"""

# Logging
from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_session_id,
    clear_context,
    LogTimer,
)

# Errors
from .errors import (
    PipelineError,
    ValidationError,
    UpstreamConfigError,
    UpstreamCallError,
    ParseError,
)

# Sessions
from .session import (
    SessionContext,
    new_session_id,
    resolve_session,
    attach_session_cookie,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_session_id",
    "clear_context",
    "LogTimer",
    # Errors
    "PipelineError",
    "ValidationError",
    "UpstreamConfigError",
    "UpstreamCallError",
    "ParseError",
    # Sessions
    "SessionContext",
    "new_session_id",
    "resolve_session",
    "attach_session_cookie",
]
