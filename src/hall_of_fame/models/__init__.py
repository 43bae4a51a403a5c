"""Pydantic transfer models."""

from .person import PersonDto
from .skill import SkillDto

__all__ = [
    "PersonDto",
    "SkillDto",
]
