"""
Client-disconnect cancellation for long-running stage requests
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request

from ..core import get_logger

logger = get_logger(__name__, component="cancellation")

DISCONNECT_POLL_SECONDS = 1.0


@asynccontextmanager
async def cancel_on_disconnect(
    request: Request,
    poll_seconds: float = DISCONNECT_POLL_SECONDS,
) -> AsyncIterator[asyncio.Event]:
    """Yield an event that is set once the client goes away.

    The event is handed to the asset generators, which stop polling their
    provider at the next wait point.
    """
    event = asyncio.Event()

    async def watch() -> None:
        while not event.is_set():
            if await request.is_disconnected():
                logger.info("Client disconnected, cancelling pending jobs", extra={
                    "path": request.url.path,
                })
                event.set()
                return
            await asyncio.sleep(poll_seconds)

    watcher = asyncio.create_task(watch())
    try:
        yield event
    finally:
        watcher.cancel()
