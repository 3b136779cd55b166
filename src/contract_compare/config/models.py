"""Data models for configuration management."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..analyzers.clause_patterns import (
    DEFAULT_CLAUSE_PATTERNS,
    DEFAULT_REPORTING_PATTERNS,
    ClausePattern,
    ReportingPattern,
)

DEFAULT_HIGH_RISK_TERMS: Tuple[str, ...] = ("critical", "significant", "major", "severe")
DEFAULT_MEDIUM_RISK_TERMS: Tuple[str, ...] = ("risk", "concern", "issue")


@dataclass(frozen=True)
class ComparisonSettings:
    """
    Read-only settings shared by every comparison run.

    Built once and passed by reference; never mutated after construction,
    so concurrent runs can share a single instance.
    """
    aligned_threshold: float = 0.85
    partial_threshold: float = 0.65
    high_risk_terms: Tuple[str, ...] = DEFAULT_HIGH_RISK_TERMS
    medium_risk_terms: Tuple[str, ...] = DEFAULT_MEDIUM_RISK_TERMS
    clause_patterns: Tuple[ClausePattern, ...] = DEFAULT_CLAUSE_PATTERNS
    reporting_patterns: Tuple[ReportingPattern, ...] = DEFAULT_REPORTING_PATTERNS
    max_workers: int = 5
    analysis_timeout: float = 60.0
    extraction_timeout: float = 30.0


DEFAULT_SETTINGS = ComparisonSettings()


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Connection settings for the qualitative analysis backend.

    ``provider`` selects the backend ("openai" or "mistral"); when it is
    None or its credentials are missing, runs fall back to templated text.
    """
    provider: Optional[str] = None
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    mistral_api_key: str = ""
    mistral_api_url: str = ""
    mistral_model: str = "mistral-large-latest"
    request_timeout: float = 60.0

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        """Build the configuration from environment variables."""
        provider = os.getenv("CONTRACT_COMPARE_ANALYZER")
        timeout = os.getenv("CONTRACT_COMPARE_ANALYSIS_TIMEOUT")
        return cls(
            provider=provider.strip().lower() if provider and provider.strip() else None,
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o"),
            mistral_api_key=os.getenv("MISTRAL_API_KEY", ""),
            mistral_api_url=os.getenv("MISTRAL_API_URL", ""),
            mistral_model=os.getenv("MISTRAL_MODEL", "mistral-large-latest"),
            request_timeout=float(timeout) if timeout else 60.0,
        )


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


def settings_to_dict(settings: ComparisonSettings) -> Dict[str, Any]:
    """Export settings in the same shape ConfigurationManager loads."""
    return {
        "aligned_threshold": settings.aligned_threshold,
        "partial_threshold": settings.partial_threshold,
        "high_risk_terms": list(settings.high_risk_terms),
        "medium_risk_terms": list(settings.medium_risk_terms),
        "clause_patterns": [
            {"clause_type": p.clause_type.value, "keywords": list(p.keywords)}
            for p in settings.clause_patterns
        ],
        "reporting_patterns": [
            {"clause_type": p.clause_type.value, "pattern": p.pattern}
            for p in settings.reporting_patterns
        ],
        "max_workers": settings.max_workers,
        "analysis_timeout": settings.analysis_timeout,
        "extraction_timeout": settings.extraction_timeout,
    }
