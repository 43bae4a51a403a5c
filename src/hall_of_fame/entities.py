"""ORM entities for the Person aggregate."""

from sqlalchemy import ForeignKey, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .database import Base


NAME_MAX_LENGTH = 100


class Person(Base):
    """A person together with the skills it owns."""

    __tablename__ = "Person"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(NAME_MAX_LENGTH), nullable=False)
    display_name: Mapped[str] = mapped_column(
        "DisplayName", String(NAME_MAX_LENGTH), nullable=False
    )

    skills: Mapped[list["Skill"]] = relationship(
        back_populates="person",
        order_by="Skill.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"Person(id={self.id!r}, name={self.name!r})"


class Skill(Base):
    """A named skill with a level, owned by exactly one person."""

    __tablename__ = "Skills"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(NAME_MAX_LENGTH), nullable=False)
    level: Mapped[int] = mapped_column("Level", SmallInteger, nullable=False)
    person_id: Mapped[int] = mapped_column(
        "PersonId",
        ForeignKey("Person.Id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    person: Mapped[Person] = relationship(back_populates="skills")

    def __repr__(self) -> str:
        return f"Skill(id={self.id!r}, name={self.name!r}, level={self.level!r})"
