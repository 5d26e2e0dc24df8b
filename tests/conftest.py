"""Shared fixtures and helpers for ipaddr-text tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the tool reads from the environment."""
    for name in (
        "IPADDR_PUBLISH_URL",
        "IPADDR_PUBLISH_TIMEOUT",
        "IPADDR_PUBLISH_TOKEN",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def make_mock_response(status_code=200):
    """Create a mock httpx response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.raise_for_status.return_value = None
    return resp
