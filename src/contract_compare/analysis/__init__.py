"""Qualitative clause-pair analysis backends for the Contract Compare system."""

from .base import AnalysisResponseError, LLMClauseAnalyzer
from .openai_analyzer import OpenAIClauseAnalyzer
from .mistral_analyzer import MistralClauseAnalyzer
from .factory import create_analyzer
from .runner import AnalysisRequest, AnalysisRunner

__all__ = [
    "AnalysisResponseError",
    "LLMClauseAnalyzer",
    "OpenAIClauseAnalyzer",
    "MistralClauseAnalyzer",
    "create_analyzer",
    "AnalysisRequest",
    "AnalysisRunner",
]
