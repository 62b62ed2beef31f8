"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SEED_SAMPLE_PROFILES", "true")


@pytest.fixture
def new_profile_data() -> dict[str, Any]:
    """A complete, valid create payload in wire format."""
    return {
        "name": "Ada Lovelace",
        "title": "Analyst",
        "company": "Analytical Engines Ltd",
        "location": "London",
        "description": "Writes programs for machines that do not exist yet.",
        "email": "ada@example.com",
        "phone": None,
        "website": "ada.dev",
        "latitude": 51.5,
        "longitude": -0.12,
        "imageUrl": "https://example.com/ada.jpg",
    }


@pytest.fixture
def empty_store():
    """Provide a fresh in-memory store with no records."""
    from src.services.profile_store import MemoryProfileStore

    return MemoryProfileStore()


@pytest.fixture
def seeded_store():
    """Provide a fresh in-memory store holding the four sample profiles."""
    from src.services.profile_store import MemoryProfileStore
    from src.services.sample_profiles import SAMPLE_PROFILES

    return MemoryProfileStore(profiles=SAMPLE_PROFILES)


@pytest.fixture
def mock_supabase_client() -> MagicMock:
    """Provide a mocked Supabase client.

    Returns:
        MagicMock: Mocked Supabase client for testing.
    """
    mock_client = MagicMock()

    mock_response = MagicMock()
    mock_response.data = []
    mock_client.table.return_value.select.return_value.limit.return_value.execute.return_value = (
        mock_response
    )
    return mock_client


@pytest.fixture
def client(seeded_store) -> Generator[TestClient, None, None]:
    """Provide a test client serving a fresh seeded store.

    Args:
        seeded_store: In-memory store with the sample profiles.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.main import create_app

    app = create_app(profile_store=seeded_store)
    with TestClient(app) as test_client:
        yield test_client
