"""Custom exceptions for contract comparison runs."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ComparisonError(Exception):
    """
    Base exception for run-level comparison failures.
    
    Provides a human-readable message together with the document that
    caused the failure and additional context for debugging.
    
    Attributes:
        message: Human-readable error description.
        document: Which document failed ("client" or "vendor"), if known.
        details: Additional error details.
    """
    message: str
    document: Optional[str] = None
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.document:
            parts.append(f"Document: {self.document}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "document": self.document,
            "details": self.details,
        }

    def for_document(self, document: str) -> "ComparisonError":
        """Return a copy of this error attributed to ``document``."""
        return self.__class__(
            message=self.message,
            document=document,
            details=dict(self.details or {}),
        )


@dataclass
class ExtractionError(ComparisonError):
    """
    Raised when no readable text can be recovered from a document.
    
    Fatal: aborts the whole comparison run.
    """


@dataclass
class DocumentCorruptedError(ExtractionError):
    """Raised when a document is corrupted, encrypted or otherwise unreadable."""


@dataclass
class UnsupportedFormatError(ExtractionError):
    """Raised when the document bytes are in a format the extractor cannot read."""

    def get_supported_formats(self) -> list[str]:
        """Return list of supported formats."""
        return self.details.get("supported_formats", [".pdf", ".docx", ".txt"])


@dataclass
class NoSectionsFoundError(ComparisonError):
    """
    Raised when extracted text contains no detectable section heading.
    
    Fatal: aborts the whole comparison run.
    """
