"""Coaching service: generative coach when available, template fallback otherwise.

The only designed recovery boundary in the system lives here: any
CollaboratorUnavailableError is replaced by the deterministic fallback and
never reaches the caller.
"""

import logging
from typing import Any

from models.schemas.coaching_report import LIST_LIMITS, CoachingReport, CoachOutcome
from services import fallback_coach, gemini_client, prompt_builder
from services.errors import CollaboratorUnavailableError

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("summary", "tailored_summary")


def normalize_generated(data: dict[str, Any]) -> CoachingReport:
    """Coerce a collaborator reply into a CoachingReport.

    Over-long lists are truncated to their limits; missing or mistyped
    fields make the reply unusable.
    """
    fields: dict[str, Any] = {}
    for name in _TEXT_FIELDS:
        value = data.get(name)
        if not isinstance(value, str):
            raise CollaboratorUnavailableError(f"Coach reply missing text field: {name}")
        fields[name] = value.strip()

    for name, limit in LIST_LIMITS.items():
        value = data.get(name)
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise CollaboratorUnavailableError(f"Coach reply missing list field: {name}")
        fields[name] = [item.strip() for item in value if item.strip()][:limit]

    return CoachingReport(**fields)


async def generate_coaching(
    job_text: str,
    candidate_text: str,
    matches: list[str] | None = None,
    gaps: list[str] | None = None,
) -> CoachingReport:
    """Ask the generative collaborator for a report."""
    prompt = prompt_builder.build_coach_prompt(job_text, candidate_text, matches, gaps)
    data = await gemini_client.generate_json(
        prompt, system_instruction=prompt_builder.COACH_SYSTEM_INSTRUCTION
    )
    return normalize_generated(data)


async def coach(
    job_text: str,
    candidate_text: str,
    matches: list[str] | None = None,
    gaps: list[str] | None = None,
) -> CoachOutcome:
    try:
        report = await generate_coaching(job_text, candidate_text, matches, gaps)
        return CoachOutcome(source="generated", report=report)
    except CollaboratorUnavailableError as e:
        logger.warning("Generative coach unavailable (%s), using fallback", e.message)

    report = fallback_coach.generate_report(job_text, candidate_text, matches, gaps)
    return CoachOutcome(source="fallback", report=report)
