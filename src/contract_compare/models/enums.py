"""Enumerations for the Contract Compare system."""

from enum import Enum


class DocumentType(Enum):
    """Document formats the text extractor understands."""
    PDF = "pdf"
    WORD = "docx"
    TEXT = "txt"


class MarkerStyle(Enum):
    """Heading marker styles recognised by the text segmenter."""
    DECIMAL = "decimal"  # 1. / 1.1 / 1.1.1
    CAPITAL_LETTER = "capital_letter"  # A.
    LETTERED_SUBSECTION = "lettered_subsection"  # A.1
    PAREN_LETTER = "paren_letter"  # (a)
    PAREN_ROMAN = "paren_roman"  # (iv)
    ROMAN = "roman"  # IV.


class ClauseType(Enum):
    """Legal subject categories assigned to clauses."""
    PAYMENT_TERMS = "Payment Terms"
    DELIVERY_TERMS = "Delivery Terms"
    RISK_AND_LIABILITY = "Risk and Liability"
    ACCEPTANCE = "Acceptance"
    TERMINATION = "Termination"
    CONFIDENTIALITY = "Confidentiality"
    INTELLECTUAL_PROPERTY = "Intellectual Property"
    SERVICE_LEVEL = "Service Level"
    DATA_PROTECTION = "Data Protection"
    FORCE_MAJEURE = "Force Majeure"
    GOVERNING_LAW = "Governing Law"
    GENERAL_TERMS = "General Terms"


class ReportingClauseType(Enum):
    """Headline clause categories used for key-clause reporting."""
    TERMINATION = "Termination"
    DELIVERY_TERMS = "Delivery Terms"
    PAYMENT_TERMS = "Payment Terms"
    CONFIDENTIALITY_AND_IP = "Confidentiality and IP"
    LIMITATION_OF_LIABILITY = "Limitation of Liability"


class AlignmentStatus(Enum):
    """Outcome of comparing a client clause with its vendor counterpart."""
    ALIGNED = "Aligned"
    PARTIAL = "Partial"
    NON_COMPLIANT = "Non-Compliant"
    MISSING = "Missing"


class RiskLevel(Enum):
    """Severity attached to a comparison result."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNKNOWN = "UNKNOWN"
