"""Abstract interfaces for the Contract Compare system."""

from .extractor import ITextExtractor
from .analyzer import IClauseAnalyzer

__all__ = [
    "ITextExtractor",
    "IClauseAnalyzer",
]
