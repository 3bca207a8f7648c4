from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .models import RunSummary, TaskResult


class ResultAggregator:
    """Derives run-level statistics from per-task results.

    Durations are summed per task (work time, not wall-clock time, since tasks
    in a wave overlap). success_rate is the succeeded/total ratio as a float.
    """

    def summarize(self, results: Iterable[TaskResult]) -> RunSummary:
        return summarize(results)

    def export_rows(self, summary: RunSummary) -> List[Dict[str, Any]]:
        """Return one flat dictionary per task, suitable for JSON or CSV reports."""
        rows: List[Dict[str, Any]] = []
        for result in summary.results:
            rows.append(
                {
                    "task_id": result.task_id,
                    "success": result.success,
                    "duration_ms": result.duration_ms,
                    "channel_count": len(result.channels),
                    "error": str(result.error) if result.error is not None else None,
                    "error_type": type(result.error).__name__ if result.error is not None else None,
                }
            )
        return rows


def summarize(results: Iterable[TaskResult]) -> RunSummary:
    results = tuple(results)
    succeeded = [r for r in results if r.success]
    failed = tuple(r for r in results if not r.success)
    total_duration_ms = sum(r.duration_ms for r in results)
    total_channels = sum(len(r.channels) for r in succeeded)
    success_rate = len(succeeded) / len(results) if results else 0.0

    return RunSummary(
        results=results,
        total_duration_ms=total_duration_ms,
        success_rate=success_rate,
        total_channels=total_channels,
        failed=failed,
    )
