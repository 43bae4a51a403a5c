"""Person repository for relational storage."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..entities import Person


class PersonRepository:
    """Repository for the Person aggregate (person plus its skills)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_all(self) -> list[Person]:
        """Get all persons with their skills loaded."""
        query = select(Person).options(selectinload(Person.skills)).order_by(Person.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, person_id: int) -> Optional[Person]:
        """Get a person by ID, or None if there is no such person."""
        query = (
            select(Person)
            .options(selectinload(Person.skills))
            .where(Person.id == person_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def add(self, person: Person) -> None:
        """Insert a new person and its skills."""
        self.session.add(person)
        await self.session.commit()

    async def update(self, person: Person) -> None:
        """Persist changes made to a loaded person."""
        self.session.add(person)
        await self.session.commit()

    async def delete(self, person: Person) -> None:
        """Delete a person and all skills it owns."""
        await self.session.delete(person)
        await self.session.commit()
