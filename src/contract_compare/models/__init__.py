"""Data models and enums for the Contract Compare system."""

from .enums import (
    AlignmentStatus,
    ClauseType,
    DocumentType,
    MarkerStyle,
    ReportingClauseType,
    RiskLevel,
)
from .document import Clause, Section
from .comparison import (
    FALLBACK_RECOMMENDATION,
    FALLBACK_RISK,
    FALLBACK_SUMMARY,
    AnalysisResult,
    ComparisonResult,
    KeyClauseComparison,
    MatchCandidate,
)

__all__ = [
    # Enums
    "AlignmentStatus",
    "ClauseType",
    "DocumentType",
    "MarkerStyle",
    "ReportingClauseType",
    "RiskLevel",
    # Document models
    "Section",
    "Clause",
    # Comparison models
    "MatchCandidate",
    "AnalysisResult",
    "ComparisonResult",
    "KeyClauseComparison",
    "FALLBACK_SUMMARY",
    "FALLBACK_RISK",
    "FALLBACK_RECOMMENDATION",
]
