"""Clause analysis for segmented contract documents.

This module turns segmented sections into classified clauses by
assigning each a clause type and decomposing its body into obligations.
"""

import logging
from typing import List, Optional

from ..models.document import Clause, Section
from ..parsers.obligation_splitter import ObligationSplitter
from .clause_patterns import ClauseClassifier


logger = logging.getLogger(__name__)


class ClauseAnalyzer:
    """
    Builds clauses from sections.
    
    Combines the clause classifier and the obligation splitter. Sections
    are processed in document order and every section yields exactly one
    clause, including sections with an empty body.
    """

    def __init__(
        self,
        classifier: Optional[ClauseClassifier] = None,
        splitter: Optional[ObligationSplitter] = None,
    ):
        self._classifier = classifier or ClauseClassifier()
        self._splitter = splitter or ObligationSplitter()

    def analyze(self, sections: List[Section]) -> List[Clause]:
        """
        Classify sections and split their obligations.
        
        Args:
            sections: Sections in document order.
            
        Returns:
            Clauses in the same order as the input sections.
        """
        clauses = [self.analyze_section(section) for section in sections]

        if logger.isEnabledFor(logging.DEBUG):
            counts: dict = {}
            for clause in clauses:
                counts[clause.clause_type.value] = counts.get(clause.clause_type.value, 0) + 1
            logger.debug(f"Clause types: {counts}")

        return clauses

    def analyze_section(self, section: Section) -> Clause:
        """Classify a single section."""
        clause_type = self._classifier.classify(section.text)
        obligations = tuple(self._splitter.split(section.content))
        return Clause(
            section=section,
            clause_type=clause_type,
            obligations=obligations,
        )
