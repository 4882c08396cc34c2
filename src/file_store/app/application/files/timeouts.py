from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


async def bounded(awaitable: Awaitable[T], *, timeout_s: float, error: Exception) -> T:
    """Await with a deadline; a timeout surfaces as `error`."""
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout_s)
    except TimeoutError as e:
        raise error from e
