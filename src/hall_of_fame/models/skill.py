"""Skill transfer model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

LEVEL_MIN = 1
LEVEL_MAX = 10


def reject_blank(value: str) -> str:
    """Treat whitespace-only strings like missing ones."""
    if not value.strip():
        raise PydanticCustomError("blank_string", "Value must not be blank")
    return value


class SkillDto(BaseModel):
    """Skill as exchanged over HTTP: name and level only."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    level: int = Field(..., ge=LEVEL_MIN, le=LEVEL_MAX, strict=True)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return reject_blank(value)
