"""Clause classification and analysis for the Contract Compare system."""

from .clause_patterns import (
    DEFAULT_CLAUSE_PATTERNS,
    DEFAULT_REPORTING_PATTERNS,
    ClauseClassifier,
    ClausePattern,
    ReportingClassifier,
    ReportingPattern,
)
from .clause_analyzer import ClauseAnalyzer

__all__ = [
    "ClauseAnalyzer",
    "ClauseClassifier",
    "ClausePattern",
    "ReportingClassifier",
    "ReportingPattern",
    "DEFAULT_CLAUSE_PATTERNS",
    "DEFAULT_REPORTING_PATTERNS",
]
