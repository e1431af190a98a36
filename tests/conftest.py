"""Shared fixtures for the string analyzer tests."""

import pytest
from fastapi.testclient import TestClient

from string_analyzer.config import Settings
from string_analyzer.crud import StringStore
from string_analyzer.main import create_app


@pytest.fixture
def store():
    """Fixture providing an empty, isolated store."""
    return StringStore()


@pytest.fixture
def app():
    """Fixture providing a fresh application with its own store."""
    return create_app(Settings(app_name="Test String Analyzer"))


@pytest.fixture
def client(app):
    """Fixture providing an HTTP client bound to the fresh application."""
    return TestClient(app)
