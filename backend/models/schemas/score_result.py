"""Scoring engine output: similarity score plus explanatory term lists."""

from pydantic import BaseModel

SCORING_METHOD = "tfidf-1-2gram-cosine"


class ScoreResult(BaseModel):
    """Computed once per request; never cached or persisted."""
    score: float = 0.0  # cosine similarity, 0.0-1.0
    score_pct: int = 0  # round-half-up of score * 100
    matches: list[str] = []  # JD terms present in the candidate document (<= 20)
    gaps: list[str] = []  # JD terms absent from the candidate document (<= 20)
    job_term_count: int = 0
    candidate_term_count: int = 0
    vocabulary_size: int = 0
    method: str = SCORING_METHOD
