"""Tests for Person service."""

import logging
from unittest.mock import AsyncMock

import pytest

from hall_of_fame.entities import Person, Skill
from hall_of_fame.models import PersonDto, SkillDto
from hall_of_fame.services import Found, NotFound, PersonService, reconcile_skills


def skill_map(person_or_dto):
    return {s.name: s.level for s in person_or_dto.skills}


def dto(name="Alice Doe", display_name="Alice", skills=None, id=0):
    return PersonDto(
        id=id,
        name=name,
        display_name=display_name,
        skills=[SkillDto(name=n, level=lvl) for n, lvl in (skills or {}).items()],
    )


def test_reconcile_updates_adds_and_removes():
    """Test reconciling {A:3, B:5} with {A:3, C:7}."""
    person = Person(name="P", display_name="P", skills=[Skill(name="A", level=3), Skill(name="B", level=5)])
    original_a = person.skills[0]

    reconcile_skills(person, dto(skills={"A": 3, "C": 7}).skills)

    assert skill_map(person) == {"A": 3, "C": 7}
    assert person.skills[0] is original_a


def test_reconcile_overwrites_level_in_place():
    """Test a matching name keeps the same skill object."""
    skill = Skill(name="A", level=3)
    person = Person(name="P", display_name="P", skills=[skill])

    reconcile_skills(person, dto(skills={"A": 9}).skills)

    assert person.skills == [skill]
    assert skill.level == 9


def test_reconcile_with_empty_payload_removes_everything():
    """Test an empty skill list clears the person's skills."""
    person = Person(name="P", display_name="P", skills=[Skill(name="A", level=3)])

    reconcile_skills(person, [])

    assert person.skills == []


@pytest.mark.asyncio
async def test_list_persons_empty(service):
    """Test listing an empty store returns an empty list."""
    assert await service.list_persons() == []


@pytest.mark.asyncio
async def test_create_person_ignores_supplied_id(service):
    """Test the service assigns the id, not the caller."""
    created = await service.create_person(dto(id=42, skills={"Python": 9}))

    assert created.id != 42
    assert created.name == "Alice Doe"
    assert skill_map(created) == {"Python": 9}


@pytest.mark.asyncio
async def test_create_then_get_round_trips(service):
    """Test a created person reads back equal apart from the id."""
    payload = dto(skills={"Python": 9, "SQL": 4})
    created = await service.create_person(payload)

    result = await service.get_person(created.id)

    assert isinstance(result, Found)
    assert result.value == payload.model_copy(update={"id": created.id})


@pytest.mark.asyncio
async def test_update_person_reconciles_skills(service, repository):
    """Test update overwrites names and reconciles skills by name."""
    created = await service.create_person(dto(skills={"A": 3, "B": 5}))
    stored = await repository.get_by_id(created.id)
    a_id = next(s.id for s in stored.skills if s.name == "A")

    result = await service.update_person(
        created.id, dto(name="Alice Smith", display_name="Al", skills={"A": 3, "C": 7})
    )

    assert isinstance(result, Found)
    stored = await repository.get_by_id(created.id)
    assert stored.name == "Alice Smith"
    assert stored.display_name == "Al"
    assert skill_map(stored) == {"A": 3, "C": 7}
    assert next(s.id for s in stored.skills if s.name == "A") == a_id


@pytest.mark.asyncio
async def test_update_person_is_idempotent(service, repository):
    """Test applying the same update twice gives the same stored state."""
    created = await service.create_person(dto(skills={"A": 3, "B": 5}))
    update = dto(skills={"A": 4, "C": 7})

    await service.update_person(created.id, update)
    first = {(s.id, s.name, s.level) for s in (await repository.get_by_id(created.id)).skills}
    await service.update_person(created.id, update)
    second = {(s.id, s.name, s.level) for s in (await repository.get_by_id(created.id)).skills}

    assert first == second


@pytest.mark.asyncio
async def test_renaming_skill_replaces_it(service, repository):
    """Test a renamed skill is removed and re-added under a new id."""
    created = await service.create_person(dto(skills={"Pyhton": 6}))
    old_id = (await repository.get_by_id(created.id)).skills[0].id

    await service.update_person(created.id, dto(skills={"Python": 6}))

    stored = await repository.get_by_id(created.id)
    assert skill_map(stored) == {"Python": 6}
    assert stored.skills[0].id != old_id


@pytest.mark.asyncio
async def test_delete_person(service):
    """Test deleting a person makes it unreachable."""
    created = await service.create_person(dto(skills={"A": 1}))

    assert isinstance(await service.delete_person(created.id), Found)
    assert isinstance(await service.get_person(created.id), NotFound)


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["get", "update", "delete"])
async def test_unknown_person_is_not_found(operation):
    """Test every lookup-based operation reports NotFound without touching storage."""
    repository = AsyncMock()
    repository.get_by_id.return_value = None
    service = PersonService(repository, logging.getLogger("test"))

    if operation == "get":
        result = await service.get_person(7)
    elif operation == "update":
        result = await service.update_person(7, dto())
    else:
        result = await service.delete_person(7)

    assert result == NotFound(7)
    repository.update.assert_not_called()
    repository.delete.assert_not_called()


@pytest.mark.asyncio
async def test_storage_errors_propagate():
    """Test failures other than not-found are raised unchanged."""
    repository = AsyncMock()
    repository.get_all.side_effect = RuntimeError("connection lost")
    service = PersonService(repository, logging.getLogger("test"))

    with pytest.raises(RuntimeError, match="connection lost"):
        await service.list_persons()
