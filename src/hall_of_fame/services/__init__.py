"""Service layer."""

from .person_service import PersonService, reconcile_skills
from .results import Found, NotFound, Result

__all__ = [
    "PersonService",
    "reconcile_skills",
    "Found",
    "NotFound",
    "Result",
]
