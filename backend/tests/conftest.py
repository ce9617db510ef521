"""Shared test configuration and fixtures."""

import pytest

from api.dependencies import reset_quota
from api.router import limiter
from config import settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """Run every test without the generative coach and without an owner token."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(settings, "owner_token", "")


@pytest.fixture(autouse=True)
def _reset_quota():
    """Fresh daily quota counters for each test."""
    reset_quota()
    yield
    reset_quota()


@pytest.fixture(autouse=True)
def _disable_burst_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True
