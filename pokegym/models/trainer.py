"""
Trainers - registered accounts owning a Pokemon roster and a badge collection.
"""
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from pokegym.models.badge import Badge
    from pokegym.models.roster_entry import RosterEntry


class Trainer(SQLModel, table=True):
    __tablename__ = "trainers"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(index=True, unique=True)
    password_hash: str  # scrypt, see pokegym.security
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Insertion order is the roster order
    pokemon: list["RosterEntry"] = Relationship(
        back_populates="trainer",
        sa_relationship_kwargs={
            "order_by": "RosterEntry.id",
            "cascade": "all, delete-orphan",
        },
    )
    badges: list["Badge"] = Relationship(
        back_populates="trainer",
        sa_relationship_kwargs={
            "order_by": "Badge.id",
            "cascade": "all, delete-orphan",
        },
    )

    def touch(self) -> None:
        """Mark the trainer as modified. Called before every save."""
        self.updated_at = datetime.now(timezone.utc)
