"""Deterministic job/candidate match scoring.

Pipeline:
1. Normalize both texts into tokens (stop-words removed)
2. Extract unigram + adjacent-bigram terms
3. Build idf over the corpus {job, candidate}
4. Project both documents onto the job-description vocabulary
5. Cosine similarity -> score
6. Rank vocabulary by job weight -> matches / gaps

The vocabulary comes from the job description only, so
score(job, candidate) is generally not equal to score(candidate, job).
"""

from models.schemas.score_result import SCORING_METHOD, ScoreResult
from services import ranker, tfidf
from services.ngrams import build_vocabulary, text_to_terms
from services.similarity import cosine_similarity


def to_percent(score: float) -> int:
    """Round half up, matching how the score gauge rounds."""
    return int(score * 100 + 0.5)


def score_documents(job_text: str, candidate_text: str) -> ScoreResult:
    job_terms = text_to_terms(job_text)
    candidate_terms = text_to_terms(candidate_text)

    idf_map = tfidf.inverse_document_frequency([job_terms, candidate_terms])
    vocabulary = build_vocabulary(job_terms)

    job_tf = tfidf.term_frequency(job_terms)
    candidate_tf = tfidf.term_frequency(candidate_terms)
    job_vector = tfidf.project_vector(job_tf, idf_map, vocabulary)
    candidate_vector = tfidf.project_vector(candidate_tf, idf_map, vocabulary)

    score = cosine_similarity(job_vector, candidate_vector)

    ranked = ranker.rank_terms(vocabulary, job_vector, candidate_tf)
    matches, gaps = ranker.matches_and_gaps(ranked)

    return ScoreResult(
        score=score,
        score_pct=to_percent(score),
        matches=matches,
        gaps=gaps,
        job_term_count=len(job_terms),
        candidate_term_count=len(candidate_terms),
        vocabulary_size=len(vocabulary),
        method=SCORING_METHOD,
    )
