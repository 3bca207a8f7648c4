from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from typing import Callable, Deque, Iterable, List, Optional, Sequence

from .models import Failed, ProviderTask, Succeeded, TaskResult, TaskState
from .normalize import ProviderPolicy
from .retry import RetryPolicy
from .session import SessionManager

logger = logging.getLogger(__name__)

StateObserver = Callable[[str, TaskState], None]


class TaskScheduler:
    """Runs provider tasks in fixed-size waves.

    Up to ``max_concurrent`` tasks are started together and the whole wave is
    awaited before the next one starts, so a slow task holds back the next
    wave even if other slots are free. Results come back in submission order
    and a failing task never affects the others.
    """

    def __init__(
        self,
        sessions: SessionManager,
        retry: RetryPolicy,
        max_concurrent: int = 4,
        observer: Optional[StateObserver] = None,
    ) -> None:
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        self._sessions = sessions
        self._retry = retry
        self._max_concurrent = max_concurrent
        self._observer = observer

    @property
    def max_concurrent(self) -> int:
        return self._max_concurrent

    async def run_all(self, tasks: Iterable[ProviderTask], max_concurrent: Optional[int] = None) -> List[TaskResult]:
        limit = self._max_concurrent if max_concurrent is None else max_concurrent
        if limit < 1:
            raise ValueError("max_concurrent must be >= 1")

        pending: Deque[ProviderTask] = deque(tasks)
        for task in pending:
            self._notify(task.task_id, TaskState.PENDING)

        results: List[TaskResult] = []
        wave_no = 0
        while pending:
            wave_no += 1
            wave = [pending.popleft() for _ in range(min(limit, len(pending)))]
            logger.debug("Starting wave %d with %d task(s)", wave_no, len(wave))
            # gather() keeps argument order, so submission order survives.
            results.extend(await asyncio.gather(*(self.run_one(task) for task in wave)))
        return results

    async def run_one(self, task: ProviderTask) -> TaskResult:
        """Execute one task and convert its outcome into a TaskResult."""
        start_ms = self._now_ms()
        policy = ProviderPolicy.for_task(task)
        try:
            if policy.is_custom:
                self._notify(task.task_id, TaskState.EXTRACTING)
                channels = list(await policy.custom_runner(task))
            else:
                raw = await self._retry.run(lambda: self._extract(task))
                self._notify(task.task_id, TaskState.NORMALIZING)
                channels = policy.apply(raw)
        except Exception as exc:  # noqa: BLE001
            duration_ms = self._now_ms() - start_ms
            self._notify(task.task_id, TaskState.FAILED)
            logger.error("%s scraper failed after %dms: %s", task.task_id, duration_ms, exc)
            return TaskResult(task_id=task.task_id, outcome=Failed(error=exc, duration_ms=duration_ms))

        duration_ms = self._now_ms() - start_ms
        self._notify(task.task_id, TaskState.SUCCEEDED)
        logger.info("%s scraper found %d channels and completed in %dms", task.task_id, len(channels), duration_ms)
        return TaskResult(
            task_id=task.task_id,
            outcome=Succeeded(channels=tuple(channels), duration_ms=duration_ms),
        )

    async def _extract(self, task: ProviderTask) -> Sequence:
        return await self._sessions.with_session(
            task.source_url,
            task.extractor,
            listener=lambda state: self._notify(task.task_id, state),
        )

    def _notify(self, task_id: str, state: TaskState) -> None:
        if self._observer is not None:
            self._observer(task_id, state)

    @staticmethod
    def _now_ms() -> int:
        return int(time.monotonic() * 1000)
