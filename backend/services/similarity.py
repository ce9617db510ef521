"""Cosine similarity between job and candidate weight vectors."""

import math

import numpy as np


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Return dot(a, b) / (|a| * |b|), clipped to [0, 1].

    A zero-norm vector on either side yields 0.0. Sums are exactly
    rounded (math.fsum) so identical vectors score exactly 1.0.
    """
    if len(a) != len(b):
        raise ValueError(f"Vector length mismatch: {len(a)} != {len(b)}")

    dot = math.fsum(a * b)
    norm_a = math.fsum(a * a)
    norm_b = math.fsum(b * b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    score = dot / math.sqrt(norm_a * norm_b)
    return min(1.0, max(0.0, score))
