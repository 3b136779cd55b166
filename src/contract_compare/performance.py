"""Step timing for comparison runs.

This module records how long each pipeline step takes so slow extraction
or analysis backends can be spotted from the accumulated statistics.
"""

import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


logger = logging.getLogger(__name__)


@dataclass
class PerformanceMetrics:
    """Timing of a single pipeline step."""

    operation_name: str
    start_time: float = field(default_factory=time.perf_counter)
    end_time: Optional[float] = None
    duration: Optional[float] = None
    success: bool = True
    error: Optional[str] = None

    def finish(self, success: bool = True, error: Optional[str] = None) -> None:
        """Mark the step as finished."""
        self.end_time = time.perf_counter()
        self.duration = self.end_time - self.start_time
        self.success = success
        self.error = error


class PerformanceMonitor:
    """
    Collects step timings across comparison runs.

    Safe to share between concurrent runs; recorded metrics are guarded
    by a lock.
    """

    def __init__(self, slow_step_threshold: float = 60.0):
        """
        Initialize the performance monitor.

        Args:
            slow_step_threshold: Step duration in seconds above which a
                warning is logged.
        """
        self.slow_step_threshold = slow_step_threshold
        self._metrics: Dict[str, List[PerformanceMetrics]] = {}
        self._lock = threading.Lock()

    @contextmanager
    def track(self, operation_name: str) -> Iterator[PerformanceMetrics]:
        """
        Time the enclosed block as one step.

        Exceptions propagate unchanged and mark the step as failed.
        """
        metric = PerformanceMetrics(operation_name=operation_name)
        try:
            yield metric
        except Exception as e:
            metric.finish(success=False, error=str(e))
            self._record(metric)
            raise
        metric.finish()
        self._record(metric)

    def _record(self, metric: PerformanceMetrics) -> None:
        with self._lock:
            self._metrics.setdefault(metric.operation_name, []).append(metric)

        if metric.duration is not None and metric.duration > self.slow_step_threshold:
            logger.warning(
                f"Step '{metric.operation_name}' took {metric.duration:.2f}s "
                f"(threshold {self.slow_step_threshold}s)"
            )

    def get_operation_stats(self, operation_name: str) -> Dict[str, Any]:
        """
        Get statistics for a specific step.

        Returns:
            Dictionary with count, average, min, max, total and
            success_rate; empty if the step was never recorded.
        """
        with self._lock:
            metrics = list(self._metrics.get(operation_name, []))

        durations = [m.duration for m in metrics if m.duration is not None]
        if not durations:
            return {}

        return {
            "count": len(durations),
            "average": sum(durations) / len(durations),
            "min": min(durations),
            "max": max(durations),
            "total": sum(durations),
            "success_rate": sum(1 for m in metrics if m.success) / len(metrics),
        }

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all recorded steps."""
        with self._lock:
            names = list(self._metrics.keys())
        return {name: self.get_operation_stats(name) for name in names}

    def reset(self) -> None:
        """Reset all metrics."""
        with self._lock:
            self._metrics.clear()
