"""Clause pattern matching for contract clause classification.

This module provides the keyword tables and first-match classifiers that
assign each section a legal-subject category, plus the narrower
classifier used for headline key-clause reporting.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from ..models.enums import ClauseType, ReportingClauseType


@dataclass(frozen=True)
class ClausePattern:
    """Keyword set bound to a clause type."""
    clause_type: ClauseType
    keywords: Tuple[str, ...]


@dataclass(frozen=True)
class ReportingPattern:
    """Regex bound to a headline reporting clause type."""
    clause_type: ReportingClauseType
    pattern: str


# Priority order: earlier entries win when text matches several sets.
DEFAULT_CLAUSE_PATTERNS: Tuple[ClausePattern, ...] = (
    ClausePattern(
        ClauseType.PAYMENT_TERMS,
        ("payment", "price", "fee", "cost", "invoice", "currency"),
    ),
    ClausePattern(
        ClauseType.DELIVERY_TERMS,
        ("delivery", "ship", "transport", "handover", "deliverable"),
    ),
    ClausePattern(
        ClauseType.RISK_AND_LIABILITY,
        ("risk", "liability", "indemnification", "warranty", "damage"),
    ),
    ClausePattern(
        ClauseType.ACCEPTANCE,
        ("acceptance", "approval", "inspection", "review", "verify"),
    ),
    ClausePattern(
        ClauseType.TERMINATION,
        ("termination", "terminate", "end", "expire", "cancel"),
    ),
    ClausePattern(
        ClauseType.CONFIDENTIALITY,
        ("confidential", "non-disclosure", "nda", "privacy", "secret"),
    ),
    ClausePattern(
        ClauseType.INTELLECTUAL_PROPERTY,
        ("intellectual property", "ip", "copyright", "patent", "trademark"),
    ),
    ClausePattern(
        ClauseType.SERVICE_LEVEL,
        ("service level", "sla", "performance", "uptime", "availability"),
    ),
    ClausePattern(
        ClauseType.DATA_PROTECTION,
        ("data protection", "gdpr", "personal data", "data privacy", "data security"),
    ),
    ClausePattern(
        ClauseType.FORCE_MAJEURE,
        ("force majeure", "act of god", "unforeseen", "beyond control"),
    ),
    ClausePattern(
        ClauseType.GOVERNING_LAW,
        ("governing law", "jurisdiction", "venue", "dispute resolution", "arbitration"),
    ),
)

DEFAULT_REPORTING_PATTERNS: Tuple[ReportingPattern, ...] = (
    ReportingPattern(
        ReportingClauseType.TERMINATION,
        r"termination|terminate|end of (agreement|contract)|expiry|expiration",
    ),
    ReportingPattern(
        ReportingClauseType.DELIVERY_TERMS,
        r"delivery|deliverable|ship|transport|handover",
    ),
    ReportingPattern(
        ReportingClauseType.PAYMENT_TERMS,
        r"payment|price|fee|cost|invoice|currency",
    ),
    ReportingPattern(
        ReportingClauseType.CONFIDENTIALITY_AND_IP,
        r"confidential|non-disclosure|nda|privacy|secret|intellectual property"
        r"|ip|copyright|patent|trademark",
    ),
    ReportingPattern(
        ReportingClauseType.LIMITATION_OF_LIABILITY,
        r"liabilit(y|ies)|limitation of liability|liability cap|indemnif(y|ication)",
    ),
)


class ClauseClassifier:
    """
    First-match keyword classifier for clause types.

    Walks the priority-ordered pattern table and returns the first clause
    type whose keyword set has a case-insensitive substring hit. Text that
    matches nothing falls back to General Terms.
    """

    def __init__(self, patterns: Tuple[ClausePattern, ...] = DEFAULT_CLAUSE_PATTERNS):
        self._patterns = patterns

    def classify(self, text: str) -> ClauseType:
        """
        Classify text into a clause type.

        Args:
            text: Clause heading and body.

        Returns:
            The first matching ClauseType, or GENERAL_TERMS.
        """
        text_lower = (text or "").lower()
        for pattern in self._patterns:
            if any(keyword.lower() in text_lower for keyword in pattern.keywords):
                return pattern.clause_type
        return ClauseType.GENERAL_TERMS


class ReportingClassifier:
    """
    Maps clauses onto the five headline reporting types.

    Clauses matching none of the five are excluded from headline reporting
    only; they stay in the full clause list used for matching.
    """

    def __init__(
        self,
        patterns: Tuple[ReportingPattern, ...] = DEFAULT_REPORTING_PATTERNS,
    ):
        self._patterns = tuple(
            (p.clause_type, re.compile(p.pattern, re.IGNORECASE)) for p in patterns
        )

    def classify(self, clause_type: str, content: str = "") -> Optional[ReportingClauseType]:
        """
        Classify a clause type label plus its content.

        Args:
            clause_type: Label of the clause's general type.
            content: Clause text.

        Returns:
            The first matching ReportingClauseType, or None.
        """
        text = f"{clause_type} {content or ''}".lower()
        for reporting_type, pattern in self._patterns:
            if pattern.search(text):
                return reporting_type
        return None

