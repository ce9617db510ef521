from pydantic import BaseModel

from models.schemas.coaching_report import CoachingReport
from models.schemas.quota_decision import QuotaDecision
from models.schemas.score_result import SCORING_METHOD


class ScoreMeta(BaseModel):
    job_term_count: int = 0
    candidate_term_count: int = 0
    vocabulary_size: int = 0
    method: str = SCORING_METHOD


class ScoreResponse(BaseModel):
    ok: bool = True
    score: float = 0.0
    score_pct: int = 0
    matches: list[str] = []
    gaps: list[str] = []
    meta: ScoreMeta = ScoreMeta()


class CoachResponse(BaseModel):
    ok: bool = True
    coach: CoachingReport


class UsageStatusResponse(BaseModel):
    ok: bool = True
    score: QuotaDecision
    coach: QuotaDecision


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
    message: str
