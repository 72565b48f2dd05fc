"""Shared fixtures for the User CRUD API tests."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from user_crud_api.app.main import create_app
from user_crud_api.app.services.user_service import UserStore

SEED_NAMES = ["VanVTT", "TrungHN", "HuyHM", "ThaoDTD"]


@pytest.fixture
def store():
    """A store seeded the same way the service seeds it at start-up."""
    return UserStore(seed=SEED_NAMES)


@pytest.fixture
def client(store):
    """In-process HTTP client backed by a real store."""
    return TestClient(create_app(store=store))


@pytest.fixture
def mock_store():
    """A mocked store; tests configure return values per call."""
    return MagicMock(spec=UserStore)


@pytest.fixture
def mock_client(mock_store):
    """In-process HTTP client backed by ``mock_store``."""
    return TestClient(create_app(store=mock_store))
