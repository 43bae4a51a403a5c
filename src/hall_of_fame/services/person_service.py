"""Person use cases: mapping, persistence and skill reconciliation."""

import logging

from ..entities import Person
from ..mapping import dto_to_person, person_to_dto, skill_from_dto
from ..models.person import PersonDto
from ..models.skill import SkillDto
from ..repositories.person_repo import PersonRepository
from .results import Found, NotFound, Result


def reconcile_skills(person: Person, incoming: list[SkillDto]) -> None:
    """Bring ``person.skills`` in line with ``incoming``, matching by name.

    Existing names get their level overwritten in place, unknown names are
    added and stored names missing from ``incoming`` are removed. A renamed
    skill is therefore removed and re-added with a new id.
    """
    for dto in incoming:
        existing = next((s for s in person.skills if s.name == dto.name), None)
        if existing is not None:
            existing.level = dto.level
        else:
            person.skills.append(skill_from_dto(dto))

    wanted = {dto.name for dto in incoming}
    for skill in [s for s in person.skills if s.name not in wanted]:
        person.skills.remove(skill)


class PersonService:
    """Orchestrates repository calls for the person endpoints."""

    def __init__(self, repository: PersonRepository, logger: logging.Logger) -> None:
        self.repository = repository
        self.logger = logger

    async def list_persons(self) -> list[PersonDto]:
        """List every person with its skills."""
        self.logger.info("Retrieving all persons from the database.")
        persons = await self.repository.get_all()
        self.logger.info("Successfully retrieved %d persons.", len(persons))
        return [person_to_dto(person) for person in persons]

    async def get_person(self, person_id: int) -> Result[PersonDto]:
        """Get one person, or NotFound."""
        self.logger.info("Retrieving person with id=%s.", person_id)
        person = await self.repository.get_by_id(person_id)
        if person is None:
            return self._not_found(person_id)

        self.logger.info("Successfully retrieved person with id=%s.", person_id)
        return Found(person_to_dto(person))

    async def create_person(self, dto: PersonDto) -> PersonDto:
        """Persist a new person; any id on ``dto`` is ignored."""
        self.logger.info("Creating a new person named %r.", dto.name)
        person = dto_to_person(dto)
        await self.repository.add(person)
        self.logger.info("Successfully created a new person with id=%s.", person.id)
        return person_to_dto(person)

    async def update_person(self, person_id: int, dto: PersonDto) -> Result[None]:
        """Overwrite names and reconcile skills, or NotFound."""
        self.logger.info("Updating person with id=%s.", person_id)
        person = await self.repository.get_by_id(person_id)
        if person is None:
            return self._not_found(person_id)

        person.name = dto.name
        person.display_name = dto.display_name
        reconcile_skills(person, dto.skills)

        await self.repository.update(person)
        self.logger.info("Successfully updated person with id=%s.", person_id)
        return Found()

    async def delete_person(self, person_id: int) -> Result[None]:
        """Delete a person and its skills, or NotFound."""
        self.logger.info("Deleting person with id=%s.", person_id)
        person = await self.repository.get_by_id(person_id)
        if person is None:
            return self._not_found(person_id)

        await self.repository.delete(person)
        self.logger.info("Successfully deleted person with id=%s.", person_id)
        return Found()

    def _not_found(self, person_id: int) -> NotFound:
        """Log and return the NotFound outcome."""
        outcome = NotFound(person_id)
        self.logger.warning(outcome.message)
        return outcome
