"""Headline comparison of the five key clause categories.

Collects, per document, every clause that maps onto one of the reporting
categories and compares the combined texts category by category.
"""

import logging
from typing import Dict, List, Optional

from ..analysis.runner import AnalysisRequest, AnalysisRunner
from ..analyzers.clause_patterns import ReportingClassifier
from ..config.models import DEFAULT_SETTINGS, ComparisonSettings
from ..interfaces.analyzer import IClauseAnalyzer
from ..models.comparison import AnalysisResult, KeyClauseComparison
from ..models.document import Clause
from ..models.enums import ReportingClauseType


logger = logging.getLogger(__name__)

NOT_FOUND_SUMMARY = "Clause not found in one or both contracts."
NOT_FOUND_RISK = "UNKNOWN"
NOT_FOUND_RECOMMENDATION = "No recommendation available."


class KeyClauseReporter:
    """
    Builds one KeyClauseComparison per reporting category.

    Categories are reported in the fixed ReportingClauseType order. Clauses
    that map to no category are skipped here only.
    """

    def __init__(
        self,
        settings: Optional[ComparisonSettings] = None,
        classifier: Optional[ReportingClassifier] = None,
    ):
        self._settings = settings or DEFAULT_SETTINGS
        self._classifier = classifier or ReportingClassifier(
            self._settings.reporting_patterns
        )

    def group(self, clauses: List[Clause]) -> Dict[ReportingClauseType, str]:
        """
        Concatenate clause bodies per reporting category.

        Returns:
            Mapping of category to the bodies of its clauses joined by blank
            lines; categories without clauses are absent.
        """
        grouped: Dict[ReportingClauseType, List[str]] = {}
        for clause in clauses:
            reporting_type = self._classifier.classify(
                clause.clause_type.value, clause.content
            )
            if reporting_type is None:
                continue
            grouped.setdefault(reporting_type, []).append(clause.content)
        return {
            reporting_type: "\n\n".join(parts)
            for reporting_type, parts in grouped.items()
        }

    def report(
        self,
        client_clauses: List[Clause],
        vendor_clauses: List[Clause],
        analyzer: Optional[IClauseAnalyzer] = None,
    ) -> List[KeyClauseComparison]:
        """
        Compare both documents on the five headline categories.

        Args:
            client_clauses: Clauses of the client document.
            vendor_clauses: Clauses of the vendor document.
            analyzer: Analysis backend; present pairs get the fallback
                result when None.

        Returns:
            Five comparisons in ReportingClauseType order.
        """
        client_texts = self.group(client_clauses)
        vendor_texts = self.group(vendor_clauses)

        present = [
            reporting_type for reporting_type in ReportingClauseType
            if client_texts.get(reporting_type) and vendor_texts.get(reporting_type)
        ]
        analyses = self._analyze(present, client_texts, vendor_texts, analyzer)

        comparisons: List[KeyClauseComparison] = []
        for reporting_type in ReportingClauseType:
            client_text = client_texts.get(reporting_type, "")
            vendor_text = vendor_texts.get(reporting_type, "")
            analysis = analyses.get(reporting_type)
            if analysis is None:
                comparisons.append(KeyClauseComparison(
                    clause_type=reporting_type,
                    client_text=client_text,
                    vendor_text=vendor_text,
                    summary=NOT_FOUND_SUMMARY,
                    risk=NOT_FOUND_RISK,
                    recommendation=NOT_FOUND_RECOMMENDATION,
                ))
                continue
            comparisons.append(KeyClauseComparison(
                clause_type=reporting_type,
                client_text=client_text,
                vendor_text=vendor_text,
                summary=analysis.summary,
                risk=analysis.risk,
                recommendation=analysis.recommendation,
            ))

        logger.info(
            f"Key clause report: {len(present)} of {len(comparisons)} "
            f"categories present in both contracts"
        )
        return comparisons

    def _analyze(
        self,
        present: List[ReportingClauseType],
        client_texts: Dict[ReportingClauseType, str],
        vendor_texts: Dict[ReportingClauseType, str],
        analyzer: Optional[IClauseAnalyzer],
    ) -> Dict[ReportingClauseType, AnalysisResult]:
        if analyzer is None:
            return {reporting_type: AnalysisResult.fallback() for reporting_type in present}

        runner = AnalysisRunner(
            analyzer,
            max_workers=self._settings.max_workers,
            timeout=self._settings.analysis_timeout,
        )
        results = runner.run([
            AnalysisRequest(
                clause_type=reporting_type.value,
                client_text=client_texts[reporting_type],
                vendor_text=vendor_texts[reporting_type],
            )
            for reporting_type in present
        ])
        return dict(zip(present, results))
