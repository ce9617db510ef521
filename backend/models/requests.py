from typing import Annotated

from pydantic import AliasChoices, BaseModel, Field, field_validator

MAX_JOB_TEXT = 20000
MAX_CANDIDATE_TEXT = 50000
MAX_HINT_TERMS = 50
MAX_HINT_TERM_LENGTH = 100

HintTerm = Annotated[str, Field(max_length=MAX_HINT_TERM_LENGTH)]


class ScoreRequest(BaseModel):
    job_text: str = Field(
        ...,
        max_length=MAX_JOB_TEXT,
        validation_alias=AliasChoices("job_text", "jd_text"),
        description="Job description text",
    )
    candidate_text: str = Field(
        ...,
        max_length=MAX_CANDIDATE_TEXT,
        validation_alias=AliasChoices("candidate_text", "cv_text"),
        description="Plain text CV / resume content",
    )

    @field_validator("job_text", "candidate_text")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class CoachRequest(ScoreRequest):
    matches: list[HintTerm] | None = Field(
        None, max_length=MAX_HINT_TERMS, description="Matched terms from a previous score call"
    )
    gaps: list[HintTerm] | None = Field(
        None, max_length=MAX_HINT_TERMS, description="Missing terms from a previous score call"
    )
