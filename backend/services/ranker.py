"""Match/gap ranking of vocabulary terms by job-description weight.

Advisory output only: the lists explain the score, they never feed back
into it.
"""

from typing import NamedTuple

import numpy as np

MAX_MATCHES = 20
MAX_GAPS = 20
MIN_TERM_LENGTH = 2


class TermWeight(NamedTuple):
    term: str
    job_weight: float
    in_candidate: bool


def rank_terms(
    vocabulary: list[str],
    job_vector: np.ndarray,
    candidate_tf: dict[str, float],
) -> list[TermWeight]:
    """Vocabulary terms sorted by descending job weight.

    The sort is stable, so equal weights keep vocabulary order.
    """
    weights = [
        TermWeight(term, float(job_vector[i]), candidate_tf.get(term, 0.0) > 0)
        for i, term in enumerate(vocabulary)
    ]
    return sorted(weights, key=lambda w: w.job_weight, reverse=True)


def matches_and_gaps(
    ranked: list[TermWeight],
    max_matches: int = MAX_MATCHES,
    max_gaps: int = MAX_GAPS,
) -> tuple[list[str], list[str]]:
    """Split ranked terms into (present in candidate, absent from candidate)."""
    eligible = [w for w in ranked if len(w.term) >= MIN_TERM_LENGTH]
    matches = [w.term for w in eligible if w.in_candidate][:max_matches]
    gaps = [w.term for w in eligible if not w.in_candidate][:max_gaps]
    return matches, gaps
