"""FastAPI dependency providers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_session
from .repositories.person_repo import PersonRepository
from .services.person_service import PersonService


def get_person_repository(
    session: AsyncSession = Depends(get_session),
) -> PersonRepository:
    """Build a repository bound to the request session."""
    return PersonRepository(session)


def get_person_service(
    request: Request,
    repository: PersonRepository = Depends(get_person_repository),
) -> PersonService:
    """Build the service with the application's logger."""
    return PersonService(repository, request.app.state.logger.getChild("person_service"))
