import asyncio
import logging
from typing import Awaitable, TypeVar
from fastapi import Request

from mdpages.common.exceptions import ClientDisconnectedException

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_until_disconnected(
    request: Request, awaitable: Awaitable[T], poll_interval: float = 0.25
) -> T:
    """Await a downstream call, cancelling it if the client goes away first."""
    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info(
                    "Client disconnected, cancelling downstream call "
                    f"for {request.url.path}"
                )
                raise ClientDisconnectedException()
    finally:
        if not task.done():
            task.cancel()
