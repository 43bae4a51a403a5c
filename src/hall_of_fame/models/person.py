"""Person transfer model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .skill import SkillDto, reject_blank


class PersonDto(BaseModel):
    """Person as exchanged over HTTP.

    ``id`` is informational on input: it is ignored on create and update,
    the server always assigns it.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(0, strict=True)
    name: str = Field(..., min_length=1, max_length=100)
    display_name: str = Field(..., min_length=1, max_length=100)
    skills: list[SkillDto] = Field(default_factory=list)

    @field_validator("name", "display_name")
    @classmethod
    def names_not_blank(cls, value: str) -> str:
        return reject_blank(value)
