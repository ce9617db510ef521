import logging

from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import Caller, get_caller, get_coach_gate, get_score_gate
from config import settings
from models.requests import MAX_JOB_TEXT, CoachRequest, ScoreRequest
from models.responses import (
    CoachResponse,
    ErrorResponse,
    ScoreMeta,
    ScoreResponse,
    UsageStatusResponse,
)
from models.schemas.score_result import SCORING_METHOD, ScoreResult
from services import coach, document_loader, scoring
from services.errors import (
    CoachFailedError,
    InternalError,
    QuotaExceededError,
    ValidationError,
)
from services.quota import QuotaGate

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

QUOTA_HEADER = "X-Quota-Remaining"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed or missing input"},
    429: {"model": ErrorResponse, "description": "Daily quota or burst limit reached"},
    500: {"model": ErrorResponse, "description": "Unexpected failure"},
}


def _consume(gate: QuotaGate, caller: Caller, response: Response, error_code: str, message: str) -> None:
    decision = gate.check_and_consume(caller.key, privileged=caller.privileged)
    if not decision.allowed:
        raise QuotaExceededError(message, code=error_code)
    response.headers[QUOTA_HEADER] = str(decision.remaining)


def _score(job_text: str, candidate_text: str) -> ScoreResponse:
    try:
        result: ScoreResult = scoring.score_documents(job_text, candidate_text)
    except Exception as e:
        logger.exception("Scoring failed")
        raise InternalError(str(e) or "Unexpected error") from e

    return ScoreResponse(
        score=result.score,
        score_pct=result.score_pct,
        matches=result.matches,
        gaps=result.gaps,
        meta=ScoreMeta(
            job_term_count=result.job_term_count,
            candidate_term_count=result.candidate_term_count,
            vocabulary_size=result.vocabulary_size,
            method=result.method,
        ),
    )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "coach_configured": bool(settings.gemini_api_key),
    }


@router.get("/ats/score")
async def score_docs():
    return {
        "ok": True,
        "about": "POST job_text and candidate_text to get a deterministic TF-IDF + cosine score.",
        "method": SCORING_METHOD,
        "quota": f"{settings.score_daily_limit} free POSTs per day; the site owner bypasses the limit.",
        "request_example": {
            "job_text": "Looking for Python + FastAPI developer with Docker and CI.",
            "candidate_text": "Built REST APIs in FastAPI, containerized with Docker, set up CI.",
        },
        "response_shape": {
            "ok": True,
            "score": "number in [0,1]",
            "score_pct": "integer in [0,100]",
            "matches": ["array", "of", "strings"],
            "gaps": ["array", "of", "strings"],
            "meta": {
                "job_term_count": 0,
                "candidate_term_count": 0,
                "vocabulary_size": 0,
                "method": SCORING_METHOD,
            },
        },
    }


@router.post("/ats/score", response_model=ScoreResponse, responses=ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def score(
    request: Request,
    response: Response,
    body: ScoreRequest,
    caller: Caller = Depends(get_caller),
    gate: QuotaGate = Depends(get_score_gate),
):
    _consume(
        gate, caller, response, "quota_exceeded",
        f"Daily free limit reached ({gate.limit}). Sign in to unlock.",
    )
    try:
        return _score(body.job_text, body.candidate_text)
    except InternalError:
        gate.refund(caller.key, privileged=caller.privileged)
        raise


@router.post("/ats/score/upload", response_model=ScoreResponse, responses=ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def score_upload(
    request: Request,
    response: Response,
    candidate_file: UploadFile = File(...),
    job_text: str = Form(...),
    caller: Caller = Depends(get_caller),
    gate: QuotaGate = Depends(get_score_gate),
):
    if not job_text.strip():
        raise ValidationError("Provide job_text")
    if len(job_text) > MAX_JOB_TEXT:
        raise ValidationError(f"Job description too long (max {MAX_JOB_TEXT} chars)")

    content = await candidate_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise ValidationError(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    candidate_text = document_loader.extract_text(candidate_file.filename or "", content)
    if not candidate_text.strip():
        raise ValidationError("No text could be extracted from the uploaded file")

    _consume(
        gate, caller, response, "quota_exceeded",
        f"Daily free limit reached ({gate.limit}). Sign in to unlock.",
    )
    try:
        return _score(job_text, candidate_text)
    except InternalError:
        gate.refund(caller.key, privileged=caller.privileged)
        raise


@router.post("/ats/coach", response_model=CoachResponse, responses=ERROR_RESPONSES)
@limiter.limit(settings.rate_limit)
async def coach_report(
    request: Request,
    response: Response,
    body: CoachRequest,
    caller: Caller = Depends(get_caller),
    gate: QuotaGate = Depends(get_coach_gate),
):
    _consume(
        gate, caller, response, "rate_limited",
        "Daily coach limit reached. Sign in to continue.",
    )

    try:
        outcome = await coach.coach(body.job_text, body.candidate_text, body.matches, body.gaps)
    except Exception as e:
        logger.exception("Coaching failed")
        gate.refund(caller.key, privileged=caller.privileged)
        raise CoachFailedError(str(e) or None) from e

    logger.info("Coaching report served (source=%s)", outcome.source)
    return CoachResponse(coach=outcome.report)


@router.get("/usage/status", response_model=UsageStatusResponse)
async def usage_status(
    caller: Caller = Depends(get_caller),
    score_gate: QuotaGate = Depends(get_score_gate),
    coach_gate: QuotaGate = Depends(get_coach_gate),
):
    return UsageStatusResponse(
        score=score_gate.status(caller.key, privileged=caller.privileged),
        coach=coach_gate.status(caller.key, privileged=caller.privileged),
    )
