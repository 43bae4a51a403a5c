"""Seed script for initial test data."""

import asyncio
import logging

from hall_of_fame.config import get_settings
from hall_of_fame.database import Database
from hall_of_fame.logging_config import setup_logging
from hall_of_fame.models import PersonDto, SkillDto
from hall_of_fame.repositories import PersonRepository
from hall_of_fame.services import PersonService

PERSONS = [
    PersonDto(
        name="Alice Doe",
        display_name="Alice",
        skills=[SkillDto(name="Python", level=9), SkillDto(name="SQL", level=7)],
    ),
    PersonDto(
        name="Bob Stone",
        display_name="Bob",
        skills=[SkillDto(name="Go", level=6), SkillDto(name="Kubernetes", level=5)],
    ),
    PersonDto(
        name="Carol White",
        display_name="Carol",
        skills=[SkillDto(name="Design", level=8)],
    ),
    PersonDto(name="Dan Brown", display_name="Dan"),
]


async def seed_data() -> None:
    """Recreate the schema and fill it with sample persons."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger("seed")

    database = Database(settings)
    try:
        await database.drop_schema()
        await database.create_schema()
        logger.info("Cleared existing data")

        async with database.session() as session:
            service = PersonService(PersonRepository(session), logger)
            for dto in PERSONS:
                await service.create_person(dto)
        logger.info("Created %d persons", len(PERSONS))
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(seed_data())
