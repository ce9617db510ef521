"""Shared dependencies for API routes."""

import secrets
from typing import NamedTuple

from fastapi import Request
from slowapi.util import get_remote_address

from config import settings
from services.quota import QuotaGate

_gates: dict[str, QuotaGate] = {}


class Caller(NamedTuple):
    key: str
    privileged: bool = False


def _is_owner(request: Request) -> bool:
    if not settings.owner_token:
        return False
    scheme, _, token = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return False
    return secrets.compare_digest(token.strip(), settings.owner_token)


def get_caller(request: Request) -> Caller:
    return Caller(key=get_remote_address(request), privileged=_is_owner(request))


def _gate(name: str, limit: int) -> QuotaGate:
    if name not in _gates:
        _gates[name] = QuotaGate(name, limit)
    return _gates[name]


def get_score_gate() -> QuotaGate:
    return _gate("score", settings.score_daily_limit)


def get_coach_gate() -> QuotaGate:
    return _gate("coach", settings.coach_daily_limit)


def reset_quota() -> None:
    """Forget all gates and their counters. Useful for testing."""
    _gates.clear()
