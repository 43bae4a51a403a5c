"""Conversions between ORM entities and transfer models."""

from .entities import Person, Skill
from .models.person import PersonDto
from .models.skill import SkillDto


def skill_to_dto(skill: Skill) -> SkillDto:
    """Map a skill entity to its transfer model."""
    return SkillDto(name=skill.name, level=skill.level)


def skill_from_dto(dto: SkillDto) -> Skill:
    """Build a new, unsaved skill entity."""
    return Skill(name=dto.name, level=dto.level)


def person_to_dto(person: Person) -> PersonDto:
    """Map a fully loaded person aggregate to its transfer model."""
    return PersonDto(
        id=person.id,
        name=person.name,
        display_name=person.display_name,
        skills=[skill_to_dto(skill) for skill in person.skills],
    )


def dto_to_person(dto: PersonDto) -> Person:
    """Build a new, unsaved entity. The DTO id is ignored."""
    return Person(
        name=dto.name,
        display_name=dto.display_name,
        skills=[skill_from_dto(skill) for skill in dto.skills],
    )
