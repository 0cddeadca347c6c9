"""
Session identity helpers.

The session token is an opaque UUID kept in an HTTP-only cookie. Each request
resolves it into an explicit ``SessionContext`` value that handlers pass
around; nothing about sessions is stored in the process.
"""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass

from fastapi import Request, Response

from ..config import SESSION_COOKIE_NAME


@dataclass(frozen=True)
class SessionContext:
    session_id: str
    is_new: bool = False


def new_session_id() -> str:
    return str(uuid.uuid4())


def resolve_session(request: Request) -> SessionContext:
    """FastAPI dependency: reuse the cookie session or mint a new one."""
    existing = (request.cookies.get(SESSION_COOKIE_NAME) or "").strip()
    if existing:
        return SessionContext(session_id=existing)
    return SessionContext(session_id=new_session_id(), is_new=True)


def is_cookie_secure() -> bool:
    return os.getenv("ENV", "").strip().lower() == "production"


def attach_session_cookie(response: Response, session: SessionContext) -> None:
    """Persist a freshly minted session id; existing cookies are left alone."""
    if not session.is_new:
        return
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session.session_id,
        httponly=True,
        secure=is_cookie_secure(),
        samesite="strict",
        path="/",
    )
