"""Decomposition of clause bodies into atomic obligation fragments."""

import re
from typing import List, Pattern, Tuple


# Applied in order, each pass refining the fragments of the previous one.
DELIMITER_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r'\.\s+(?=[A-Z])'),  # period before capital
    re.compile(r';\s+(?=[A-Z])'),  # semicolon before capital
    re.compile(r':\s+(?=[A-Z])'),  # colon before capital
    re.compile(r'\.\s+(?=\d+\.)'),  # period before numbered item
    re.compile(r'\.\s+(?=\([a-z]\))'),  # period before lettered subitem
)

BULLET_START = re.compile(r'^[•\-*]\s')
BULLET_SPLIT = re.compile(r'[•\-*]\s')


class ObligationSplitter:
    """Splits section content into ordered obligation fragments."""

    def __init__(self, delimiters: Tuple[Pattern[str], ...] = DELIMITER_PATTERNS):
        self._delimiters = delimiters

    def split(self, content: str) -> List[str]:
        """
        Split content into obligations.

        Args:
            content: Body text of a section.

        Returns:
            Non-empty obligation fragments in document order.
        """
        fragments = _clean([content or ""])

        for pattern in self._delimiters:
            fragments = _clean(
                piece
                for fragment in fragments
                for piece in pattern.split(fragment)
            )

        obligations: List[str] = []
        for fragment in fragments:
            if BULLET_START.match(fragment):
                obligations.extend(_clean(BULLET_SPLIT.split(fragment)))
            else:
                obligations.append(fragment)
        return obligations


def _clean(pieces) -> List[str]:
    return [piece.strip() for piece in pieces if piece and piece.strip()]
