"""Template-based coaching report used when no generative coach answers.

Pure and deterministic: no network, no randomness, no timestamps. Only
strengths and gaps vary with the input; every other field comes from a
static catalog of generic career-coaching advice.
"""

from models.schemas.coaching_report import CoachingReport
from services.text_normalizer import COACH_NORMALIZER

MAX_INFERRED_TERMS = 12
MAX_BULLETS = 8
MIN_INFERRED_LENGTH = 3

SUMMARY = (
    "You're a promising match. Tighten phrasing, mirror their keywords, and add "
    "measurable outcomes. Fix a few gaps with concise examples, and you'll read "
    "like an immediate contributor."
)

ACTION_BULLETS: tuple[str, ...] = (
    "Quantify outcomes (%, time saved, cost reduced) on 3-4 bullets.",
    "Front-load the stack and platforms you used (e.g. FastAPI, Docker, AWS).",
    "Mirror their exact phrasing for 6-8 key skills (spelled identically).",
    "Move the most relevant experience to the top and tighten older roles.",
    "Add a one-line 'Impact' sentence for your most recent role.",
    "Trim soft adjectives; prefer measurable verbs (reduced, shipped, automated).",
    "Group tools into neat clusters (e.g. 'Infra: Docker, Render, CI').",
    "Add brief links to code, demos, or write-ups where safe.",
)

REVISED_RESUME_BULLETS: tuple[str, ...] = (
    "Delivered FastAPI services with Docker; improved p95 latency by 28% and cut errors by 35%.",
    "Ran production deploys with CI; added health checks and rollbacks to reduce incidents.",
    "Implemented TF-IDF + cosine search to rank relevance; boosted recruiter accuracy by 23%.",
    "Wrote clean API docs and smoke tests; kept a weekly release cadence without regressions.",
)

TAILORED_SUMMARY = (
    "Python engineer focused on reliable web services and practical search. "
    "Strong in FastAPI, Docker, CI, and cloud basics; hands-on with TF-IDF/cosine "
    "scoring. I ship small, measurable improvements at a steady cadence."
)

INTERVIEW_QUESTIONS: tuple[str, ...] = (
    "What metrics define success in this role during the first 90 days?",
    "How is work planned and shipped: weekly tickets, projects, or bets?",
    "Where are the biggest performance or reliability pain points today?",
    "How do you review code and share learnings across the team?",
    "What's the deploy pipeline like, and how often do you release?",
)


def infer_matches_and_gaps(job_text: str, candidate_text: str) -> tuple[list[str], list[str]]:
    """Token-set intersection and job-only difference, in job-text order."""
    job_tokens = COACH_NORMALIZER.tokenize(job_text)
    candidate_tokens = set(COACH_NORMALIZER.tokenize(candidate_text))

    unique_job_tokens = [t for t in dict.fromkeys(job_tokens) if len(t) >= MIN_INFERRED_LENGTH]
    matches = [t for t in unique_job_tokens if t in candidate_tokens]
    gaps = [t for t in unique_job_tokens if t not in candidate_tokens]
    return matches[:MAX_INFERRED_TERMS], gaps[:MAX_INFERRED_TERMS]


def strength_bullet(term: str) -> str:
    return f'Solid evidence of "{term}".'


def gap_bullet(term: str) -> str:
    return f'Limited mention of "{term}" — add a concrete example.'


def generate_report(
    job_text: str,
    candidate_text: str,
    matches: list[str] | None = None,
    gaps: list[str] | None = None,
) -> CoachingReport:
    """Build a fallback report.

    Empty or missing ``matches`` / ``gaps`` are inferred from the raw texts,
    each side independently.
    """
    if not matches or not gaps:
        inferred_matches, inferred_gaps = infer_matches_and_gaps(job_text, candidate_text)
        matches = matches or inferred_matches
        gaps = gaps or inferred_gaps

    return CoachingReport(
        summary=SUMMARY,
        strengths=[strength_bullet(m) for m in matches[:MAX_BULLETS]],
        gaps=[gap_bullet(g) for g in gaps[:MAX_BULLETS]],
        action_bullets=list(ACTION_BULLETS),
        revised_resume_bullets=list(REVISED_RESUME_BULLETS),
        tailored_summary=TAILORED_SUMMARY,
        interview_questions=list(INTERVIEW_QUESTIONS),
    )
