"""Pydantic contracts passed between services."""

from models.schemas.coaching_report import CoachingReport, CoachOutcome
from models.schemas.quota_decision import QuotaDecision
from models.schemas.score_result import ScoreResult

__all__ = [
    "CoachingReport",
    "CoachOutcome",
    "QuotaDecision",
    "ScoreResult",
]
