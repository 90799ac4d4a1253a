"""
Roster entries - one Pokemon on a trainer's team.
"""
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, Relationship, SQLModel, UniqueConstraint

if TYPE_CHECKING:
    from pokegym.models.trainer import Trainer

MAX_ROSTER_SIZE = 6


class RosterEntry(SQLModel, table=True):
    __tablename__ = "roster_entries"
    __table_args__ = (
        UniqueConstraint("trainer_id", "pokemon_id", name="uq_trainer_pokemon"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    trainer_id: int = Field(foreign_key="trainers.id", index=True)
    pokemon_id: int  # PokeAPI catalog id
    name: str
    nickname: str = ""
    level: int = Field(default=1, ge=1, le=100)
    types: list[str] = Field(default_factory=list, sa_column=Column(JSON))
    date_added: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    trainer: Optional["Trainer"] = Relationship(back_populates="pokemon")
