"""
Gyms - named gyms with a leader and a badge, both unique across gyms.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Gym(SQLModel, table=True):
    __tablename__ = "gyms"

    id: Optional[int] = Field(default=None, primary_key=True)
    gym_name: str = Field(index=True, unique=True)
    gym_leader: str
    gym_badge: str = Field(index=True, unique=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
