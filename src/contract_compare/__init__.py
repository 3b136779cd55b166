"""
Contract Compare

Clause-level comparison of a client's required contract terms against a
vendor's offered terms, flagging misalignment and risk.
"""

__version__ = "0.1.0"

# Export main components
from .models.enums import (
    AlignmentStatus,
    ClauseType,
    DocumentType,
    MarkerStyle,
    ReportingClauseType,
    RiskLevel,
)
from .models.document import Clause, Section
from .models.comparison import (
    AnalysisResult,
    ComparisonResult,
    KeyClauseComparison,
    MatchCandidate,
)
from .parsers import (
    ComparisonError,
    ExtractionError,
    DocumentCorruptedError,
    UnsupportedFormatError,
    NoSectionsFoundError,
    DocumentTextExtractor,
    ObligationSplitter,
    TextSegmenter,
)
from .analyzers import ClauseAnalyzer, ClauseClassifier, ReportingClassifier
from .alignment import DocumentMatcher, KeyClauseReporter, SimilarityScorer, StatusResolver
from .analysis import (
    MistralClauseAnalyzer,
    OpenAIClauseAnalyzer,
    create_analyzer,
)
from .interfaces import IClauseAnalyzer, ITextExtractor
from .config import (
    DEFAULT_SETTINGS,
    AnalysisConfig,
    ComparisonSettings,
    ConfigurationError,
    ConfigurationManager,
    ValidationResult,
)
from .pipeline import ComparisonPipeline, PipelineStats

__all__ = [
    "AlignmentStatus",
    "ClauseType",
    "DocumentType",
    "MarkerStyle",
    "ReportingClauseType",
    "RiskLevel",
    "Clause",
    "Section",
    "AnalysisResult",
    "ComparisonResult",
    "KeyClauseComparison",
    "MatchCandidate",
    "ComparisonError",
    "ExtractionError",
    "DocumentCorruptedError",
    "UnsupportedFormatError",
    "NoSectionsFoundError",
    "DocumentTextExtractor",
    "ObligationSplitter",
    "TextSegmenter",
    "ClauseAnalyzer",
    "ClauseClassifier",
    "ReportingClassifier",
    "DocumentMatcher",
    "KeyClauseReporter",
    "SimilarityScorer",
    "StatusResolver",
    "MistralClauseAnalyzer",
    "OpenAIClauseAnalyzer",
    "create_analyzer",
    "IClauseAnalyzer",
    "ITextExtractor",
    "DEFAULT_SETTINGS",
    "AnalysisConfig",
    "ComparisonSettings",
    "ConfigurationError",
    "ConfigurationManager",
    "ValidationResult",
    "ComparisonPipeline",
    "PipelineStats",
]
