"""Concurrent execution of per-pair clause analyses."""

import logging
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Dict, List

from ..interfaces.analyzer import IClauseAnalyzer
from ..models.comparison import AnalysisResult


logger = logging.getLogger(__name__)

# Wait used while no call has started yet.
POLL_INTERVAL = 0.05


@dataclass(frozen=True)
class AnalysisRequest:
    """One clause pair to analyze."""
    clause_type: str
    client_text: str
    vendor_text: str


class AnalysisRunner:
    """
    Runs analyzer calls concurrently on a thread pool.

    Every request gets exactly one result, placed at the request's index.
    Each call's timeout counts from the moment a worker starts it, so time
    spent queued behind other calls is not charged to it. A call that raises
    or exceeds the timeout yields the fallback result for that request only.
    """

    def __init__(
        self,
        analyzer: IClauseAnalyzer,
        max_workers: int = 5,
        timeout: float = 60.0
    ):
        self._analyzer = analyzer
        self._max_workers = max_workers
        self._timeout = timeout

    def run(self, requests: List[AnalysisRequest]) -> List[AnalysisResult]:
        """
        Analyze all requests and wait for every call to finish or time out.

        Workers held by timed-out calls cannot be reclaimed. Once every
        worker is held that way, requests still queued get the fallback
        result instead of waiting for a worker that may never free up.

        Args:
            requests: Clause pairs to analyze.

        Returns:
            Results in the same order as ``requests``.
        """
        if not requests:
            return []

        results: List[AnalysisResult] = [AnalysisResult.fallback()] * len(requests)
        workers = min(self._max_workers, len(requests))
        started: Dict[int, float] = {}
        abandoned: List[Future] = []

        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="clause-analysis")
        try:
            pending: Dict[Future, int] = {
                executor.submit(self._call, started, index, request): index
                for index, request in enumerate(requests)
            }
            while pending:
                done, _ = wait(
                    pending,
                    timeout=self._next_wait(pending, started),
                    return_when=FIRST_COMPLETED,
                )
                for future in done:
                    index = pending.pop(future)
                    results[index] = self._collect(future, requests[index])

                now = time.monotonic()
                for future, index in list(pending.items()):
                    start = started.get(index)
                    if start is not None and now - start >= self._timeout:
                        del pending[future]
                        abandoned.append(future)
                        logger.warning(
                            f"Analysis of {requests[index].clause_type} clause "
                            f"timed out after {self._timeout}s"
                        )

                if pending and sum(1 for f in abandoned if not f.done()) >= workers:
                    self._drop_queued(pending, started, requests)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        failed = sum(1 for r in results if r.failed)
        if failed:
            logger.warning(f"{failed} of {len(requests)} clause analyses degraded to fallback")
        return results

    def _call(self, started: Dict[int, float], index: int, request: AnalysisRequest):
        started[index] = time.monotonic()
        return self._analyzer.analyze(
            request.clause_type,
            request.client_text,
            request.vendor_text,
        )

    def _next_wait(self, pending: Dict[Future, int], started: Dict[int, float]) -> float:
        """Seconds until the earliest running call reaches its timeout."""
        now = time.monotonic()
        remaining = [
            started[index] + self._timeout - now
            for index in pending.values()
            if index in started
        ]
        if not remaining:
            return POLL_INTERVAL
        return max(0.0, min(remaining))

    def _drop_queued(
        self,
        pending: Dict[Future, int],
        started: Dict[int, float],
        requests: List[AnalysisRequest],
    ) -> None:
        for future, index in list(pending.items()):
            if index not in started and future.cancel():
                del pending[future]
                logger.warning(
                    f"Analysis of {requests[index].clause_type} clause skipped: "
                    f"all workers are held by timed-out calls"
                )

    def _collect(self, future: Future, request: AnalysisRequest) -> AnalysisResult:
        try:
            result = future.result()
        except Exception as e:
            logger.warning(f"Analysis of {request.clause_type} clause failed: {e}")
            return AnalysisResult.fallback()

        if not isinstance(result, AnalysisResult):
            logger.warning(
                f"Analyzer returned {type(result).__name__} for {request.clause_type} clause"
            )
            return AnalysisResult.fallback()
        return result
