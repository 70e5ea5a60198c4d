# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a fresh app, store and test client per test
# =============================================================================

import os
from datetime import date

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SEED_DATABASE", "true")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.main import create_app
from core.models import PersonData
from core.services import PeopleService, PeopleStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def app() -> FastAPI:
    """A fresh application with a seeded store."""
    return create_app(seed=True)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client for the seeded application."""
    return TestClient(app)


@pytest.fixture
def empty_client() -> TestClient:
    """Test client for an application with an empty store."""
    return TestClient(create_app(seed=False))


@pytest.fixture
def store() -> PeopleStore:
    """An empty people store."""
    return PeopleStore()


@pytest.fixture
def seeded_store() -> PeopleStore:
    """A people store holding the four seed records (ids 1-4)."""
    store = PeopleStore()
    store.seed()
    return store


@pytest.fixture
def service(seeded_store: PeopleStore) -> PeopleService:
    """People service over the seeded store."""
    return PeopleService(seeded_store)


@pytest.fixture
def sample_person() -> PersonData:
    """A living person (no death date)."""
    return PersonData(
        first_name="Grace",
        last_name="Hopper",
        born=date(1906, 12, 9),
    )


@pytest.fixture
def sample_person_json() -> dict:
    """Wire form of a person with a death date."""
    return {
        "firstName": "Kurt",
        "lastName": "Gödel",
        "born": "1906-04-28",
        "died": "1978-01-14",
    }
