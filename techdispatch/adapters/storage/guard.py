"""Timeout and error translation shared by the blob store adapters."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError

from techdispatch.domain.exceptions import StorageIOError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def guarded(key: str, operation: str, awaitable: Awaitable[T], timeout: float) -> T:
    """Await a storage call, bounding it by *timeout* seconds.

    Timeouts and low-level I/O or database failures become StorageIOError.
    Domain errors raised by the call (NotFoundError, ...) pass through.
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error("Storage %s of %s timed out after %.1fs", operation, key, timeout)
        raise StorageIOError(key, f"{operation} timed out after {timeout}s") from e
    except (OSError, SQLAlchemyError) as e:
        logger.error("Storage %s of %s failed: %s", operation, key, e)
        raise StorageIOError(key, f"{operation} failed: {e}") from e
