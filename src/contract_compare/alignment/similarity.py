"""Lexical similarity scoring between clause texts.

Scores are weighted Jaccard overlaps of TF-IDF vectors fitted on the two
texts being compared, so every call is independent of any other document.
"""

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer


WORD_TOKEN_PATTERN = r"(?u)\b\w+\b"


class SimilarityScorer:
    """
    Stateless TF-IDF similarity between two text blocks.

    A two-document corpus is built per call from raw term counts and
    smoothed inverse document frequency. The score is the sum of
    element-wise minimum weights divided by the sum of element-wise
    maximum weights, which is symmetric and lies in [0, 1].
    """

    def score(self, text_a: str, text_b: str) -> float:
        """
        Score the lexical overlap of two texts.

        Args:
            text_a: First text block.
            text_b: Second text block.

        Returns:
            1.0 for identical blocks, 0.0 for blocks sharing no terms
            or when either block has no word tokens.
        """
        vectorizer = TfidfVectorizer(
            lowercase=True,
            token_pattern=WORD_TOKEN_PATTERN,
            norm=None,
            smooth_idf=True,
        )
        try:
            matrix = vectorizer.fit_transform([text_a or "", text_b or ""])
        except ValueError:
            # Empty vocabulary
            return 0.0

        weights = matrix.toarray()
        if not weights[0].any() or not weights[1].any():
            return 0.0

        numerator = np.minimum(weights[0], weights[1]).sum()
        denominator = np.maximum(weights[0], weights[1]).sum()
        if denominator == 0:
            return 0.0
        return float(numerator / denominator)
