"""Outcomes returned by services instead of raising for expected cases."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """The requested person existed; ``value`` is the operation's result."""

    value: T = None


@dataclass(frozen=True)
class NotFound:
    """No person with ``person_id`` exists."""

    person_id: int

    @property
    def message(self) -> str:
        return f"Person with id={self.person_id} not found."


Result = Union[Found[T], NotFound]
