"""Cross-document clause matching.

Pairs every client clause with the most similar vendor clause of the same
clause type. Clauses of different types are never compared.
"""

import logging
from typing import Dict, List, Optional

from ..models.comparison import MatchCandidate
from ..models.document import Clause
from ..models.enums import ClauseType
from .similarity import SimilarityScorer


logger = logging.getLogger(__name__)


class DocumentMatcher:
    """
    Matches client clauses to vendor clauses by type, then by similarity.
    """

    def __init__(self, scorer: Optional[SimilarityScorer] = None):
        """
        Initialize the matcher.

        Args:
            scorer: Similarity scorer; a default SimilarityScorer if None.
        """
        self._scorer = scorer or SimilarityScorer()

    def match(
        self,
        client_clauses: List[Clause],
        vendor_clauses: List[Clause]
    ) -> List[MatchCandidate]:
        """
        Find the best vendor counterpart for each client clause.

        Args:
            client_clauses: Clauses of the client document, in order.
            vendor_clauses: Clauses of the vendor document, in order.

        Returns:
            One MatchCandidate per client clause, in client order. A
            candidate without a vendor clause means the vendor document has
            no clause of that type.
        """
        vendor_by_type = group_by_type(vendor_clauses)
        candidates: List[MatchCandidate] = []

        for clause in client_clauses:
            same_type = vendor_by_type.get(clause.clause_type, [])
            if not same_type:
                candidates.append(MatchCandidate(client_clause=clause))
                continue
            candidates.append(self._best_match(clause, same_type))

        matched = sum(1 for c in candidates if c.has_match)
        logger.debug(
            f"Matched {matched} of {len(candidates)} client clauses "
            f"against {len(vendor_clauses)} vendor clauses"
        )
        return candidates

    def _best_match(self, clause: Clause, vendor_clauses: List[Clause]) -> MatchCandidate:
        """Pick the highest scoring vendor clause; ties keep the earliest."""
        best_clause = vendor_clauses[0]
        best_score = self._scorer.score(clause.text, best_clause.text)

        for vendor_clause in vendor_clauses[1:]:
            score = self._scorer.score(clause.text, vendor_clause.text)
            if score > best_score:
                best_clause, best_score = vendor_clause, score

        return MatchCandidate(
            client_clause=clause,
            vendor_clause=best_clause,
            score=best_score,
        )


def group_by_type(clauses: List[Clause]) -> Dict[ClauseType, List[Clause]]:
    """Group clauses by clause type, preserving document order within each group."""
    grouped: Dict[ClauseType, List[Clause]] = {}
    for clause in clauses:
        grouped.setdefault(clause.clause_type, []).append(clause)
    return grouped
