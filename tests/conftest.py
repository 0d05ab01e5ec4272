"""Pytest configuration and fixtures.

Provides environment isolation and a capturing logger double. Fixtures
marked autouse apply to every test.
"""

from __future__ import annotations

import os

import pytest

from tests.helpers import CaptureLogger
from tfwait import Wait

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr("tfwait.config.load_dotenv", lambda *_args, **_kwargs: False)


@pytest.fixture(autouse=True)
def isolate_tfwait_env(monkeypatch):
    """Clear TFWAIT_* env vars to prevent test pollution."""
    for key in list(os.environ.keys()):
        if key.startswith("TFWAIT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Doubles
# =============================================================================


@pytest.fixture
def capture_logger() -> CaptureLogger:
    """Return a fresh logger double."""
    return CaptureLogger()


@pytest.fixture
def wait(capture_logger: CaptureLogger) -> Wait:
    """Return a Wait bound to the capturing logger."""
    return Wait(capture_logger)
