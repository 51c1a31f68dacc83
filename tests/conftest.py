"""Pytest configuration for reqlog tests."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add the project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from reqlog.config import get_settings  # noqa: E402
from reqlog.logger import reset_default_logger  # noqa: E402
from reqlog.logging.config import clear_context, reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def reset_logging_state(monkeypatch):
    """Start every test with unconfigured logging and a clean environment."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_JSON_FORMAT", raising=False)
    get_settings.cache_clear()
    reset_logging()
    reset_default_logger()
    clear_context()
    yield
    get_settings.cache_clear()
    reset_logging()
    reset_default_logger()
    clear_context()


@pytest.fixture
def base_logger():
    """A stand-in base logger that records every call."""
    return MagicMock(name="base_logger")


@pytest.fixture
def express_request():
    """Request-like mapping in the shape of the sign-in example."""
    return {
        "id": "req-1",
        "method": "GET",
        "originalUrl": "/login",
        "user": {"id": "u9"},
        "ip": "1.2.3.4",
    }
