"""Pytest configuration and fixtures."""

import logging

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from hall_of_fame.config import Settings
from hall_of_fame.database import Database
from hall_of_fame.main import create_app
from hall_of_fame.repositories.person_repo import PersonRepository
from hall_of_fame.services.person_service import PersonService


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        log_level="DEBUG",
        log_file=None,
    )


@pytest_asyncio.fixture
async def database(settings):
    """Database with a freshly created schema."""
    db = Database(settings)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def repository(session):
    return PersonRepository(session)


@pytest.fixture
def service(repository):
    return PersonService(repository, logging.getLogger("test.person_service"))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """HTTP client; entering it runs the lifespan, which creates the schema."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def alice_payload():
    return {
        "name": "Alice Doe",
        "displayName": "Alice",
        "skills": [
            {"name": "Python", "level": 9},
            {"name": "SQL", "level": 5},
        ],
    }
