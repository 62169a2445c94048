"""
Pytest configuration and fixtures
"""
import os

# Tests never talk to a real MongoDB; set before the app modules read it
os.environ["STORE_BACKEND"] = "memory"

import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app
from store import get_store
from store_memory import InMemorySubmissionStore


@pytest.fixture
def settings():
    return Settings(
        store_backend="memory",
        active_week="week1",
        correct_answer="42",
        answer_match="case_insensitive",
        leaderboard_scope="all",
    )


@pytest.fixture
def memory_store():
    return InMemorySubmissionStore()


@pytest.fixture
def client(memory_store, settings):
    """TestClient wired to a fresh in-memory store and the test settings."""
    app.dependency_overrides[get_store] = lambda: memory_store
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
