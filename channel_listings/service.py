from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from .config import ScraperSettings
from .metrics import ResultAggregator
from .models import ProviderTask, RunSummary, TaskResult
from .registry import ProviderRegistry
from .retry import RetryPolicy
from .scheduler import StateObserver, TaskScheduler
from .session import SessionManager
from .storage import JsonFileStorage, StorageBase

logger = logging.getLogger(__name__)


class ChannelListingService:
    """Wires registry, sessions, retries, scheduler, aggregation and storage together."""

    def __init__(
        self,
        settings: Optional[ScraperSettings] = None,
        registry: Optional[ProviderRegistry] = None,
        sessions: Optional[SessionManager] = None,
        retry: Optional[RetryPolicy] = None,
        storage: Optional[StorageBase] = None,
        aggregator: Optional[ResultAggregator] = None,
        observer: Optional[StateObserver] = None,
    ) -> None:
        self._settings = settings or ScraperSettings()
        self._registry = registry or ProviderRegistry()
        self._sessions = sessions or SessionManager(self._settings)
        self._retry = retry or RetryPolicy(
            max_attempts=self._settings.retry_attempts,
            base_delay_ms=self._settings.retry_base_delay_ms,
        )
        self._storage = storage or JsonFileStorage(self._settings.output_dir)
        self._aggregator = aggregator or ResultAggregator()
        self._scheduler = TaskScheduler(
            self._sessions,
            self._retry,
            max_concurrent=self._settings.max_concurrent,
            observer=observer,
        )

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    async def scrape_all(self, write_files: bool = False, max_concurrent: Optional[int] = None) -> RunSummary:
        """Scrape every registered provider and summarize the run.

        Files are written after the whole run; an OutputWriteError aborts it.
        """
        limit = self._settings.max_concurrent if max_concurrent is None else max_concurrent
        tasks = self._registry.create_tasks(write_files=write_files)
        logger.info("Starting scrapers (max %d in parallel)...", limit)

        results = await self._scheduler.run_all(tasks, limit)
        if write_files:
            self._persist(tasks, results)

        summary = self._aggregator.summarize(results)
        self._log_summary(summary)
        return summary

    async def scrape_provider(self, name: str, write_files: bool = False) -> TaskResult:
        """Scrape one provider by name (case-insensitive).

        Raises ProviderNotFoundError before anything runs if the name is unknown.
        """
        task = self._registry.create_task(self._registry.get(name), write_files=write_files)
        results = await self._scheduler.run_all([task], 1)
        if write_files:
            self._persist([task], results)
        return results[0]

    def _persist(self, tasks: Sequence[ProviderTask], results: Sequence[TaskResult]) -> None:
        for task, result in zip(tasks, results):
            if result.success and task.sink:
                path = self._storage.write(task.sink, result.channels)
                logger.info("Wrote %d channels for %s to %s", len(result.channels), task.task_id, path)

    def _log_summary(self, summary: RunSummary) -> None:
        log = {
            "event": "run_summary",
            "total_duration_ms": summary.total_duration_ms,
            "success_rate": summary.success_rate_label,
            "total_channels": summary.total_channels,
            "failed": [{"provider": r.task_id, "error": str(r.error)} for r in summary.failed],
        }
        logger.info(json.dumps(log, ensure_ascii=False))
        for result in summary.failed:
            logger.warning("- %s: %s", result.task_id, result.error)


def channels_payload(results: Sequence[TaskResult]) -> List[Dict[str, Any]]:
    """JSON-ready ``[{provider, channels}]`` for the providers that succeeded."""
    return [
        {"provider": r.task_id, "channels": [c.to_dict() for c in r.channels]}
        for r in results
        if r.success
    ]


async def scrape_all_providers(
    settings: Optional[ScraperSettings] = None,
    write_files: bool = False,
    max_concurrent: Optional[int] = None,
) -> RunSummary:
    return await ChannelListingService(settings).scrape_all(write_files=write_files, max_concurrent=max_concurrent)


async def scrape_provider(
    name: str,
    settings: Optional[ScraperSettings] = None,
    write_files: bool = False,
) -> TaskResult:
    return await ChannelListingService(settings).scrape_provider(name, write_files=write_files)
