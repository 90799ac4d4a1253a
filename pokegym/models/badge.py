"""
Badges - snapshot of a gym's badge at the time a trainer earned it.
"""
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel, UniqueConstraint

if TYPE_CHECKING:
    from pokegym.models.trainer import Trainer


class Badge(SQLModel, table=True):
    __tablename__ = "badges"
    __table_args__ = (
        UniqueConstraint("trainer_id", "name", name="uq_trainer_badge"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    trainer_id: int = Field(foreign_key="trainers.id", index=True)
    name: str
    # Copied from the gym, not linked: renaming a gym leaves earned badges alone
    gym_name: str
    gym_leader: str
    date_earned: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    trainer: Optional["Trainer"] = Relationship(back_populates="badges")
