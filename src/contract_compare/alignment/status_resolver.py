"""Status and risk resolution for matched clauses.

Maps similarity scores to alignment statuses, derives a risk level from the
status and any qualitative analysis text, and produces the templated
suggested fixes and fallback texts attached to comparison results.
"""

from typing import Optional, Tuple

from ..config.models import DEFAULT_SETTINGS, ComparisonSettings
from ..models.enums import AlignmentStatus, ClauseType, RiskLevel


MISSING_SUMMARY_TEMPLATE = (
    "Missing {type} clause in vendor contract. This represents a significant "
    "risk as the vendor contract does not address {type_lower} requirements."
)
MISSING_RECOMMENDATION_TEMPLATE = (
    "Request vendor to add a {type} clause that aligns with client "
    "requirements. Consider this a critical negotiation point."
)
LEXICAL_SUMMARY_TEMPLATE = "Lexical similarity with the vendor {type} clause is {score:.0%}."
MANUAL_REVIEW_RECOMMENDATION = "Please review the clauses manually for differences."


class StatusResolver:
    """
    Resolves alignment status and risk for a clause comparison.

    Thresholds and risk vocabularies come from ComparisonSettings and are
    read-only; one resolver can serve any number of concurrent runs.
    """

    def __init__(self, settings: Optional[ComparisonSettings] = None):
        self._settings = settings or DEFAULT_SETTINGS

    def resolve_status(self, score: Optional[float]) -> AlignmentStatus:
        """
        Map a similarity score to an alignment status.

        Args:
            score: Similarity score, or None when no vendor clause matched.

        Returns:
            The AlignmentStatus for the score.
        """
        if score is None:
            return AlignmentStatus.MISSING
        if score >= self._settings.aligned_threshold:
            return AlignmentStatus.ALIGNED
        if score >= self._settings.partial_threshold:
            return AlignmentStatus.PARTIAL
        return AlignmentStatus.NON_COMPLIANT

    def resolve_risk(
        self,
        status: AlignmentStatus,
        analysis_text: Optional[str] = None
    ) -> RiskLevel:
        """
        Derive the risk level for a status.

        Partial matches start at low and are escalated by keywords found in
        the analysis text: high-risk terms first, then medium-risk terms.

        Args:
            status: Resolved alignment status.
            analysis_text: Summary and risk explanation from the analyzer.

        Returns:
            The RiskLevel for the result.
        """
        if status in (AlignmentStatus.MISSING, AlignmentStatus.NON_COMPLIANT):
            return RiskLevel.HIGH
        if status == AlignmentStatus.ALIGNED or not analysis_text:
            return RiskLevel.LOW

        text = analysis_text.lower()
        if any(term in text for term in self._settings.high_risk_terms):
            return RiskLevel.HIGH
        if any(term in text for term in self._settings.medium_risk_terms):
            return RiskLevel.MEDIUM
        return RiskLevel.LOW

    def resolve(
        self,
        score: Optional[float],
        analysis_text: Optional[str] = None
    ) -> Tuple[AlignmentStatus, RiskLevel]:
        """Resolve status and risk together."""
        status = self.resolve_status(score)
        return status, self.resolve_risk(status, analysis_text)

    @staticmethod
    def suggested_fix(
        status: AlignmentStatus,
        clause_type: ClauseType,
        title: str
    ) -> Optional[str]:
        """Templated fix for a non-aligned clause; None when aligned."""
        if status == AlignmentStatus.ALIGNED:
            return None
        if status == AlignmentStatus.MISSING:
            return f"Add {clause_type.value} clause for '{title}'"
        return (
            f"Review and align {clause_type.value} clause '{title}' "
            f"with client requirements"
        )

    @staticmethod
    def missing_summary(clause_type: ClauseType) -> str:
        return MISSING_SUMMARY_TEMPLATE.format(
            type=clause_type.value, type_lower=clause_type.value.lower()
        )

    @staticmethod
    def missing_recommendation(clause_type: ClauseType) -> str:
        return MISSING_RECOMMENDATION_TEMPLATE.format(type=clause_type.value)

    @staticmethod
    def lexical_summary(clause_type: ClauseType, score: float) -> str:
        """Summary used for matched pairs when no analyzer is configured."""
        return LEXICAL_SUMMARY_TEMPLATE.format(type=clause_type.value, score=score)
