"""Error taxonomy shared by the scoring and coaching services.

Every error that reaches the HTTP layer is rendered as
``{"ok": false, "error": code, "message": message}`` with ``status_code``.
"""


class ATSError(Exception):
    code: str = "server_error"
    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: str | None = None, code: str | None = None) -> None:
        self.message = message or self.default_message
        if code:
            self.code = code
        super().__init__(self.message)


class ValidationError(ATSError):
    """Missing or malformed input."""

    code = "bad_request"
    status_code = 400
    default_message = "Provide job_text and candidate_text"


class QuotaExceededError(ATSError):
    """Caller is over the daily free limit. Not retried."""

    code = "quota_exceeded"
    status_code = 429
    default_message = "Daily free limit reached. Sign in to unlock."


class CollaboratorUnavailableError(ATSError):
    """The generative coaching service failed or timed out.

    Recovered locally by the coach service; never surfaced to callers.
    """

    code = "coach_unavailable"
    status_code = 503
    default_message = "Coaching collaborator unavailable"


class CoachFailedError(ATSError):
    code = "coach_failed"
    status_code = 500
    default_message = "Failed to generate coaching"


class InternalError(ATSError):
    code = "server_error"
    status_code = 500
