"""Clause alignment for the Contract Compare system.

This module provides lexical similarity scoring, same-type clause matching,
status and risk resolution, and headline key-clause reporting.
"""

from .similarity import SimilarityScorer
from .document_matcher import DocumentMatcher, group_by_type
from .status_resolver import StatusResolver
from .key_clause_reporter import KeyClauseReporter

__all__ = [
    "SimilarityScorer",
    "DocumentMatcher",
    "group_by_type",
    "StatusResolver",
    "KeyClauseReporter",
]
