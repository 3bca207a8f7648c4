from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from .backoff import BackoffStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy:
    """Runs an async operation with bounded retries and exponential backoff.

    Every exception is retried the same way. When the attempts are used up the
    last exception is re-raised as is, so callers see the original type.
    """

    def __init__(
        self,
        max_attempts: int = 1,
        base_delay_ms: float = 1000.0,
        backoff: Optional[BackoffStrategy] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._max_attempts = max_attempts
        self._backoff = backoff or BackoffStrategy(base_ms=base_delay_ms)
        self._sleep = sleep

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    async def run(self, fn: Callable[[], Awaitable[T]]) -> T:
        for attempt_index in range(self._max_attempts):
            try:
                return await fn()
            except Exception as exc:  # noqa: BLE001
                logger.warning("Attempt %d failed: %s", attempt_index + 1, exc)
                if attempt_index >= self._max_attempts - 1:
                    raise
                delay_ms = self._backoff.get_delay_ms(attempt_index)
                logger.debug("Retrying in %.0fms", delay_ms)
                await self._sleep(delay_ms / 1000.0)
        raise AssertionError("unreachable")
