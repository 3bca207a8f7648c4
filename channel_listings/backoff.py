from __future__ import annotations

import random
from typing import Optional


class BackoffStrategy:
    """Exponential backoff for retry delays.

    Computes the delay as base * 2^attempt_index, where the first retry has
    attempt_index 0. An optional cap and a relative jitter can be enabled;
    both are off by default so the delay sequence is exact."""

    def __init__(
        self,
        base_ms: float = 1000.0,
        max_ms: Optional[float] = None,
        jitter: float = 0.0,
    ) -> None:
        if base_ms < 0:
            raise ValueError("base_ms must be >= 0")
        if jitter < 0:
            raise ValueError("jitter must be >= 0")
        self._base = base_ms
        self._max = max_ms
        self._jitter = jitter

    def get_delay_ms(self, attempt_index: int) -> float:
        """Return the delay in milliseconds to wait after failed attempt ``attempt_index``."""
        delay = self._base * (2 ** max(attempt_index, 0))
        if self._max is not None:
            delay = min(self._max, delay)
        if self._jitter:
            delay += random.uniform(0, delay * self._jitter)
        return delay
