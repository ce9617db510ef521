import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Generative coaching collaborator (optional)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    coach_timeout_seconds: float = 20.0
    coach_temperature: float = 0.7

    # Free daily uses per caller (UTC day)
    score_daily_limit: int = 2
    coach_daily_limit: int = 2
    owner_token: str = ""  # bearer token for the site owner; empty disables bypass

    rate_limit: str = "30/minute"
    max_upload_size_mb: int = 5
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
