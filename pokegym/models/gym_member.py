"""
Gym Members - the member set of a gym. Row order is join order.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel, UniqueConstraint


class GymMember(SQLModel, table=True):
    __tablename__ = "gym_members"
    __table_args__ = (
        UniqueConstraint("gym_id", "trainer_id", name="uq_gym_trainer"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    gym_id: int = Field(foreign_key="gyms.id", index=True)
    trainer_id: int = Field(foreign_key="trainers.id", index=True)
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
