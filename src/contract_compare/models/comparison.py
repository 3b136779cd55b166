"""Comparison result data models for the Contract Compare system."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .document import Clause
from .enums import AlignmentStatus, ClauseType, ReportingClauseType, RiskLevel

FALLBACK_SUMMARY = "Unable to generate summary."
FALLBACK_RISK = "UNKNOWN"
FALLBACK_RECOMMENDATION = "Unable to generate recommendation."


@dataclass(frozen=True)
class MatchCandidate:
    """
    Pairing of a client clause with its best vendor clause of the same type.
    
    ``vendor_clause`` is None when the vendor document has no clause of the
    client clause's type; ``score`` is defined only when a vendor clause is
    present.
    """
    client_clause: Clause
    vendor_clause: Optional[Clause] = None
    score: Optional[float] = None

    def __post_init__(self):
        if (self.vendor_clause is None) != (self.score is None):
            raise ValueError("score must be set if and only if vendor_clause is set")

    @property
    def has_match(self) -> bool:
        return self.vendor_clause is not None


@dataclass(frozen=True)
class AnalysisResult:
    """Qualitative analysis of a clause pair returned by an analyzer."""
    summary: str
    risk: str
    recommendation: str
    # Set by fallback() only.
    failed: bool = False

    @classmethod
    def fallback(cls) -> "AnalysisResult":
        """The fixed triple substituted when analysis fails."""
        return cls(
            summary=FALLBACK_SUMMARY,
            risk=FALLBACK_RISK,
            recommendation=FALLBACK_RECOMMENDATION,
            failed=True,
        )

    @property
    def text(self) -> str:
        """Summary and risk explanation joined for keyword scanning."""
        return " ".join(part for part in (self.summary, self.risk) if part)


@dataclass
class ComparisonResult:
    """
    Result of comparing one client clause against the vendor document.
    
    Exactly one result is produced per client clause, in client-document
    order.
    """
    title: str
    client_text: str
    vendor_text: str
    status: AlignmentStatus
    risk: RiskLevel
    clause_type: ClauseType
    score: Optional[float] = None
    summary: Optional[str] = None
    recommendation: Optional[str] = None
    suggested_fix: Optional[str] = None
    analysis_risk: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase transport shape."""
        return {
            "title": self.title,
            "clientText": self.client_text,
            "vendorText": self.vendor_text,
            "status": self.status.value,
            "risk": self.risk.value,
            "clauseType": self.clause_type.value,
            "score": self.score,
            "summary": self.summary,
            "recommendation": self.recommendation,
            "suggestedFix": self.suggested_fix,
            "analysisRisk": self.analysis_risk,
        }


@dataclass
class KeyClauseComparison:
    """Headline comparison for one of the five reporting clause types."""
    clause_type: ReportingClauseType
    client_text: str
    vendor_text: str
    summary: str
    risk: str
    recommendation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "clauseType": self.clause_type.value,
            "clientClause": self.client_text,
            "vendorClause": self.vendor_text,
            "summary": self.summary,
            "risk": self.risk,
            "recommendation": self.recommendation,
        }
