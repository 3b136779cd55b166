"""Text extraction and segmentation for the Contract Compare system."""

from .exceptions import (
    ComparisonError,
    ExtractionError,
    DocumentCorruptedError,
    UnsupportedFormatError,
    NoSectionsFoundError,
)
from .segmenter import HEADING_RULES, HeadingRule, TextSegmenter, extract_title
from .obligation_splitter import ObligationSplitter
from .text_extractor import DocumentTextExtractor

__all__ = [
    "ComparisonError",
    "ExtractionError",
    "DocumentCorruptedError",
    "UnsupportedFormatError",
    "NoSectionsFoundError",
    "HEADING_RULES",
    "HeadingRule",
    "TextSegmenter",
    "extract_title",
    "ObligationSplitter",
    "DocumentTextExtractor",
]
