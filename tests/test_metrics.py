"""Tests for the ResultAggregator."""

import unittest

from channel_listings.metrics import ResultAggregator, summarize
from channel_listings.models import Channel, Failed, Succeeded, TaskResult


def _ok(task_id, channels=0, duration_ms=10) -> TaskResult:
    """Helper to build a succeeded TaskResult with ``channels`` channels."""
    return TaskResult(
        task_id,
        Succeeded(channels=tuple(Channel(str(i), f"C{i}") for i in range(channels)), duration_ms=duration_ms),
    )


def _failed(task_id, message="boom", duration_ms=10) -> TaskResult:
    return TaskResult(task_id, Failed(error=RuntimeError(message), duration_ms=duration_ms))


class TestSummarize(unittest.TestCase):
    """Verify partitioning, totals and the success ratio."""

    def test_empty_run(self):
        summary = summarize([])
        self.assertEqual(summary.results, ())
        self.assertEqual(summary.total_duration_ms, 0)
        self.assertEqual(summary.success_rate, 0.0)
        self.assertEqual(summary.total_channels, 0)
        self.assertEqual(summary.failed, ())

    def test_mixed_results(self):
        results = [_ok("A", 2, 10), _failed("B", duration_ms=7), _ok("C", 3, 5)]
        summary = summarize(results)
        self.assertEqual(summary.total_duration_ms, 22)
        self.assertAlmostEqual(summary.success_rate, 2 / 3)
        self.assertEqual(summary.success_rate_label, "2/3")
        self.assertEqual(summary.total_channels, 5)
        self.assertEqual([r.task_id for r in summary.failed], ["B"])
        self.assertEqual(str(summary.failed[0].error), "boom")

    def test_all_succeeded(self):
        summary = summarize([_ok("A", 1), _ok("B", 1)])
        self.assertEqual(summary.success_rate, 1.0)
        self.assertEqual(summary.failed, ())

    def test_keeps_result_order(self):
        results = [_failed("Z"), _ok("A"), _failed("M")]
        summary = summarize(results)
        self.assertEqual([r.task_id for r in summary.results], ["Z", "A", "M"])
        self.assertEqual([r.task_id for r in summary.failed], ["Z", "M"])


class TestResultAggregator(unittest.TestCase):
    def test_summarize_delegates(self):
        summary = ResultAggregator().summarize([_ok("A", 4)])
        self.assertEqual(summary.total_channels, 4)

    def test_export_rows(self):
        aggregator = ResultAggregator()
        rows = aggregator.export_rows(aggregator.summarize([_ok("A", 2, 3), _failed("B", "nope", 4)]))
        self.assertEqual(
            rows,
            [
                {"task_id": "A", "success": True, "duration_ms": 3, "channel_count": 2, "error": None, "error_type": None},
                {"task_id": "B", "success": False, "duration_ms": 4, "channel_count": 0, "error": "nope", "error_type": "RuntimeError"},
            ],
        )


if __name__ == "__main__":
    unittest.main()
