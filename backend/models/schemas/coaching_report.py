"""Coaching report shape shared by the generative and fallback coaches."""

from typing import Literal

from pydantic import BaseModel

# Upper bounds per list; the generative collaborator is asked for
# strengths/gaps 5-8, action_bullets 6-10, revised bullets 4-6, questions 5-7
LIST_LIMITS: dict[str, int] = {
    "strengths": 8,
    "gaps": 8,
    "action_bullets": 10,
    "revised_resume_bullets": 6,
    "interview_questions": 7,
}


class CoachingReport(BaseModel):
    summary: str
    strengths: list[str]
    gaps: list[str]
    action_bullets: list[str]
    revised_resume_bullets: list[str]
    tailored_summary: str
    interview_questions: list[str]


class CoachOutcome(BaseModel):
    """Tagged result: which coach produced the report.

    Both variants expose the same ``report`` shape, so callers never need
    to special-case the source.
    """
    source: Literal["generated", "fallback"]
    report: CoachingReport
