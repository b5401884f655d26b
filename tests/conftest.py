"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from bmicalc.config import settings
from bmicalc.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def clear_on_error(monkeypatch):
    """Switch the form to clear-on-error for one test."""
    monkeypatch.setattr(settings, "clear_result_on_error", True)
    yield settings


@pytest.fixture
def default_mode(monkeypatch):
    """Override BMI_DEFAULT_MODE for one test: default_mode("imperial")."""

    def _set(mode):
        monkeypatch.setattr(settings, "default_mode", mode)
        return settings

    return _set
