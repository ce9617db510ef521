"""TF-IDF statistics over the two-document corpus {job, candidate}."""

from collections import Counter

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer


def _identity(terms: list[str]) -> list[str]:
    return terms


def term_frequency(terms: list[str]) -> dict[str, float]:
    """Raw term counts divided by the document's term-sequence length."""
    length = len(terms) or 1
    return {term: count / length for term, count in Counter(terms).items()}


def inverse_document_frequency(corpus: list[list[str]]) -> dict[str, float]:
    """Smoothed idf: ``ln((1 + N) / (1 + df)) + 1``.

    Every term seen in any document gets an entry, including terms that
    will never enter the job-description vocabulary.
    """
    if not any(corpus):
        return {}

    # Documents arrive pre-extracted; the identity analyzer keeps our terms as-is
    vectorizer = TfidfVectorizer(analyzer=_identity, smooth_idf=True, norm=None)
    vectorizer.fit(corpus)
    idf = vectorizer.idf_
    return {term: float(idf[col]) for term, col in vectorizer.vocabulary_.items()}


def project_vector(
    tf_map: dict[str, float],
    idf_map: dict[str, float],
    vocabulary: list[str],
) -> np.ndarray:
    """Dense tf*idf weights aligned to ``vocabulary`` order (0 when absent)."""
    return np.array(
        [tf_map.get(term, 0.0) * idf_map.get(term, 0.0) for term in vocabulary],
        dtype=np.float64,
    )
