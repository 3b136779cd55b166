"""End-to-end comparison pipeline for the Contract Compare system.

This module provides the orchestration logic that wires together text
extraction, segmentation, clause classification, matching, qualitative
analysis and status resolution to compare a client contract with a
vendor contract.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .alignment.document_matcher import DocumentMatcher
from .alignment.key_clause_reporter import KeyClauseReporter
from .alignment.similarity import SimilarityScorer
from .alignment.status_resolver import MANUAL_REVIEW_RECOMMENDATION, StatusResolver
from .analysis.factory import create_analyzer
from .analysis.runner import AnalysisRequest, AnalysisRunner
from .analyzers.clause_analyzer import ClauseAnalyzer
from .analyzers.clause_patterns import ClauseClassifier
from .config.models import DEFAULT_SETTINGS, AnalysisConfig, ComparisonSettings
from .interfaces.analyzer import IClauseAnalyzer
from .interfaces.extractor import ITextExtractor
from .models.comparison import (
    AnalysisResult,
    ComparisonResult,
    KeyClauseComparison,
    MatchCandidate,
)
from .models.document import Clause
from .models.enums import AlignmentStatus, RiskLevel
from .parsers.exceptions import ComparisonError, ExtractionError
from .parsers.segmenter import TextSegmenter
from .parsers.text_extractor import DocumentTextExtractor
from .performance import PerformanceMonitor


logger = logging.getLogger(__name__)

CLIENT = "client"
VENDOR = "vendor"


@dataclass
class PipelineStats:
    """Statistics about pipeline execution."""

    total_executions: int = 0
    successful_executions: int = 0
    failed_executions: int = 0
    average_processing_time: float = 0.0
    total_processing_time: float = 0.0


class ComparisonPipeline:
    """
    Main comparison pipeline.

    Holds only read-only collaborators and settings, so one instance can
    serve concurrent runs. Extraction failures and documents without
    sections abort a run; analysis failures degrade single results.
    """

    def __init__(
        self,
        settings: Optional[ComparisonSettings] = None,
        extractor: Optional[ITextExtractor] = None,
        analyzer: Optional[IClauseAnalyzer] = None,
        segmenter: Optional[TextSegmenter] = None,
        clause_analyzer: Optional[ClauseAnalyzer] = None,
        matcher: Optional[DocumentMatcher] = None,
        resolver: Optional[StatusResolver] = None,
        reporter: Optional[KeyClauseReporter] = None,
        performance_monitor: Optional[PerformanceMonitor] = None,
    ):
        """
        Initialize the comparison pipeline.

        Args:
            settings: Comparison settings (defaults if not provided).
            extractor: Text extraction collaborator (created if not provided).
            analyzer: Optional clause analysis collaborator. Without one,
                matched pairs get templated summaries.
            segmenter: Optional text segmenter (created if not provided).
            clause_analyzer: Optional clause analyzer (created if not provided).
            matcher: Optional document matcher (created if not provided).
            resolver: Optional status resolver (created if not provided).
            reporter: Optional key clause reporter (created if not provided).
            performance_monitor: Optional step timer (created if not provided).
        """
        self.settings = settings or DEFAULT_SETTINGS
        self._extractor = extractor or DocumentTextExtractor()
        self._analyzer = analyzer
        self._segmenter = segmenter or TextSegmenter()
        self._clause_analyzer = clause_analyzer or ClauseAnalyzer(
            classifier=ClauseClassifier(self.settings.clause_patterns)
        )
        self._matcher = matcher or DocumentMatcher(SimilarityScorer())
        self._resolver = resolver or StatusResolver(self.settings)
        self._reporter = reporter or KeyClauseReporter(self.settings)
        self.performance_monitor = performance_monitor or PerformanceMonitor(
            slow_step_threshold=self.settings.analysis_timeout
        )

        self.stats = PipelineStats()
        self._stats_lock = threading.Lock()

        logger.info(
            f"Comparison pipeline initialized "
            f"(analyzer: {type(analyzer).__name__ if analyzer else 'none'})"
        )

    @classmethod
    def from_env(
        cls,
        settings: Optional[ComparisonSettings] = None,
        **kwargs: Any,
    ) -> "ComparisonPipeline":
        """Create a pipeline whose analyzer is selected by environment variables."""
        analyzer = create_analyzer(AnalysisConfig.from_env())
        return cls(settings=settings, analyzer=analyzer, **kwargs)

    @property
    def analyzer(self) -> Optional[IClauseAnalyzer]:
        return self._analyzer

    # =========================================================================
    # Public entry points
    # =========================================================================

    def compare(self, client_data: bytes, vendor_data: bytes) -> List[ComparisonResult]:
        """
        Compare two contract documents.

        Args:
            client_data: Raw bytes of the client's contract.
            vendor_data: Raw bytes of the vendor's contract.

        Returns:
            One ComparisonResult per client clause, in client-document order.

        Raises:
            ExtractionError: If either document yields no readable text.
            NoSectionsFoundError: If either document has no section headings.
        """
        return self._run(
            lambda: self._compare_texts(*self._extract_documents(client_data, vendor_data))
        )

    def compare_texts(self, client_text: str, vendor_text: str) -> List[ComparisonResult]:
        """
        Compare two contracts given as plain text.

        Raises:
            NoSectionsFoundError: If either text has no section headings.
        """
        return self._run(lambda: self._compare_texts(client_text, vendor_text))

    def compare_key_clauses(
        self, client_data: bytes, vendor_data: bytes
    ) -> List[KeyClauseComparison]:
        """
        Compare two contract documents on the five headline clause categories.

        Raises:
            ExtractionError: If either document yields no readable text.
            NoSectionsFoundError: If either document has no section headings.
        """
        return self._run(
            lambda: self._compare_key_clause_texts(
                *self._extract_documents(client_data, vendor_data)
            )
        )

    def compare_key_clause_texts(
        self, client_text: str, vendor_text: str
    ) -> List[KeyClauseComparison]:
        """Headline comparison of two contracts given as plain text."""
        return self._run(lambda: self._compare_key_clause_texts(client_text, vendor_text))

    # =========================================================================
    # Steps
    # =========================================================================

    def _run(self, operation):
        start_time = time.perf_counter()
        success = False
        try:
            with self.performance_monitor.track("comparison_run"):
                results = operation()
            success = True
            logger.info(
                f"Comparison completed in {time.perf_counter() - start_time:.2f}s"
            )
            return results
        except ComparisonError as e:
            logger.error(f"Comparison failed: {e}")
            raise
        except Exception as e:
            logger.exception(f"Comparison failed unexpectedly: {e}")
            raise
        finally:
            self._update_stats(success, time.perf_counter() - start_time)

    def _compare_texts(self, client_text: str, vendor_text: str) -> List[ComparisonResult]:
        client_clauses, vendor_clauses = self._build_clauses(client_text, vendor_text)

        logger.info("Step 4: Matching clauses")
        with self.performance_monitor.track("match_clauses"):
            candidates = self._matcher.match(client_clauses, vendor_clauses)
        matched = sum(1 for c in candidates if c.has_match)
        logger.info(f"Matched {matched} of {len(candidates)} client clauses")

        analyses = self._analyze_candidates(candidates)

        logger.info("Step 6: Resolving status and risk")
        results = [
            self._build_result(candidate, analyses.get(index))
            for index, candidate in enumerate(candidates)
        ]
        return results

    def _compare_key_clause_texts(
        self, client_text: str, vendor_text: str
    ) -> List[KeyClauseComparison]:
        client_clauses, vendor_clauses = self._build_clauses(client_text, vendor_text)

        logger.info("Step 4: Comparing key clauses")
        with self.performance_monitor.track("key_clause_report"):
            return self._reporter.report(client_clauses, vendor_clauses, self._analyzer)

    def _extract_documents(self, client_data: bytes, vendor_data: bytes) -> Tuple[str, str]:
        """
        Extract both documents concurrently.

        Both calls start at once, so a single deadline bounds each of them
        by the extraction timeout.
        """
        logger.info("Step 1: Extracting document text")
        timeout = self.settings.extraction_timeout

        with self.performance_monitor.track("extract_text"):
            executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="text-extraction")
            try:
                futures = {
                    CLIENT: executor.submit(self._extractor.extract, client_data),
                    VENDOR: executor.submit(self._extractor.extract, vendor_data),
                }
                wait(futures.values(), timeout=timeout)
                texts = {
                    document: self._collect_extraction(document, future, timeout)
                    for document, future in futures.items()
                }
            finally:
                executor.shutdown(wait=False, cancel_futures=True)

        logger.info(
            f"Extracted {len(texts[CLIENT])} client and {len(texts[VENDOR])} vendor characters"
        )
        return texts[CLIENT], texts[VENDOR]

    def _collect_extraction(self, document: str, future, timeout: float) -> str:
        if not future.done():
            future.cancel()
            raise ExtractionError(
                message=f"Text extraction timed out after {timeout}s",
                document=document,
            )
        try:
            return future.result()
        except ComparisonError as e:
            if e.document:
                raise
            raise e.for_document(document) from e
        except Exception as e:
            raise ExtractionError(
                message=f"Text extraction failed: {e}",
                document=document,
                details={"original_error": str(e)},
            )

    def _build_clauses(
        self, client_text: str, vendor_text: str
    ) -> Tuple[List[Clause], List[Clause]]:
        logger.info("Step 2: Segmenting client document")
        with self.performance_monitor.track("segment_documents"):
            client_sections = self._segment(client_text, CLIENT)
            logger.info(f"Client document segmented: {len(client_sections)} sections")

            logger.info("Step 2: Segmenting vendor document")
            vendor_sections = self._segment(vendor_text, VENDOR)
            logger.info(f"Vendor document segmented: {len(vendor_sections)} sections")

        logger.info("Step 3: Classifying clauses")
        with self.performance_monitor.track("classify_clauses"):
            client_clauses = self._clause_analyzer.analyze(client_sections)
            vendor_clauses = self._clause_analyzer.analyze(vendor_sections)
        return client_clauses, vendor_clauses

    def _segment(self, text: str, document: str):
        try:
            return self._segmenter.segment(text)
        except ComparisonError as e:
            if e.document:
                raise
            raise e.for_document(document) from e

    def _analyze_candidates(
        self, candidates: List[MatchCandidate]
    ) -> Dict[int, AnalysisResult]:
        """Run the analyzer on every matched pair; keys are candidate indexes."""
        if self._analyzer is None:
            logger.info("Step 5: No analyzer configured, using templated summaries")
            return {}

        indexes = [i for i, candidate in enumerate(candidates) if candidate.has_match]
        logger.info(f"Step 5: Analyzing {len(indexes)} matched clause pairs")

        runner = AnalysisRunner(
            self._analyzer,
            max_workers=self.settings.max_workers,
            timeout=self.settings.analysis_timeout,
        )
        with self.performance_monitor.track("analyze_pairs"):
            results = runner.run([
                AnalysisRequest(
                    clause_type=candidates[i].client_clause.clause_type.value,
                    client_text=candidates[i].client_clause.text,
                    vendor_text=candidates[i].vendor_clause.text,
                )
                for i in indexes
            ])
        return dict(zip(indexes, results))

    def _build_result(
        self,
        candidate: MatchCandidate,
        analysis: Optional[AnalysisResult],
    ) -> ComparisonResult:
        clause = candidate.client_clause
        clause_type = clause.clause_type
        status = self._resolver.resolve_status(candidate.score)
        suggested_fix = self._resolver.suggested_fix(status, clause_type, clause.title)

        if status == AlignmentStatus.MISSING:
            return ComparisonResult(
                title=clause.title,
                client_text=clause.text,
                vendor_text="",
                status=status,
                risk=self._resolver.resolve_risk(status),
                clause_type=clause_type,
                summary=self._resolver.missing_summary(clause_type),
                recommendation=self._resolver.missing_recommendation(clause_type),
                suggested_fix=suggested_fix,
            )

        if analysis is None:
            risk = self._resolver.resolve_risk(status)
            summary = self._resolver.lexical_summary(clause_type, candidate.score)
            recommendation = MANUAL_REVIEW_RECOMMENDATION
            analysis_risk = None
        elif analysis.failed:
            risk = RiskLevel.UNKNOWN
            summary = analysis.summary
            recommendation = analysis.recommendation
            analysis_risk = analysis.risk
        else:
            risk = self._resolver.resolve_risk(status, analysis.text)
            summary = analysis.summary
            recommendation = analysis.recommendation
            analysis_risk = analysis.risk

        return ComparisonResult(
            title=clause.title,
            client_text=clause.text,
            vendor_text=candidate.vendor_clause.text,
            status=status,
            risk=risk,
            clause_type=clause_type,
            score=candidate.score,
            summary=summary,
            recommendation=recommendation,
            suggested_fix=suggested_fix,
            analysis_risk=analysis_risk,
        )

    # =========================================================================
    # Statistics
    # =========================================================================

    def _update_stats(self, success: bool, processing_time: float) -> None:
        """Update pipeline statistics."""
        with self._stats_lock:
            self.stats.total_executions += 1
            if success:
                self.stats.successful_executions += 1
            else:
                self.stats.failed_executions += 1

            self.stats.total_processing_time += processing_time
            self.stats.average_processing_time = (
                self.stats.total_processing_time / self.stats.total_executions
            )

    def get_stats(self) -> PipelineStats:
        """Get pipeline execution statistics."""
        return self.stats

    def get_performance_stats(self) -> Dict[str, Dict[str, Any]]:
        """
        Get detailed timing statistics for all pipeline steps.

        Returns:
            Dictionary with timing metrics for each step.
        """
        return self.performance_monitor.get_all_stats()
