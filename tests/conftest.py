"""
pytest Fixtures for Library GraphQL API Tests

Every test gets its own LibraryStore loaded from the default seed, and the
client fixture wraps a fresh application serving that store. Mutations in
one test can therefore never leak into another.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app
import os

os.environ["SEED_DATASET"] = "default"
os.environ["DEFAULT_PAGE_SIZE"] = "2"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from library_api.main import create_app
from library_api.models import Author
from library_api.schemas import AuthorCreate
from library_api.services.authors import add_author
from library_api.store import LibraryStore


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def store() -> LibraryStore:
    """A store loaded with the default seed (5 authors, 5 books)."""
    return LibraryStore("default")


@pytest.fixture
def author_without_books(store: LibraryStore) -> Author:
    """An extra author with no books, so it can be deleted."""
    return add_author(store, AuthorCreate(name="Jane Austen", birth_year=1775))


# =============================================================================
# CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def client(store: LibraryStore) -> Generator[TestClient, None, None]:
    """
    Create a test client for an app serving the test store.

    The client runs the app's lifespan, exactly like uvicorn would.
    """
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client
