"""Quota gate answer for one caller on one UTC day."""

from typing import Literal

from pydantic import BaseModel


class QuotaDecision(BaseModel):
    allowed: bool
    remaining: int
    used: int
    limit: int
    day: str  # UTC date, YYYY-MM-DD
    reason: Literal["ok", "limit_reached", "owner"] = "ok"
