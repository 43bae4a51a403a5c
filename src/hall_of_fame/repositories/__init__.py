"""Repository modules for relational storage."""

from .person_repo import PersonRepository

__all__ = [
    "PersonRepository",
]
