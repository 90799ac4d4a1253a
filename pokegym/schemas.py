"""
Response models shared by the routers.

Field names are snake_case in Python and camelCase on the wire.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pokegym.models.badge import Badge
from pokegym.models.gym import Gym
from pokegym.models.roster_entry import RosterEntry
from pokegym.models.trainer import Trainer


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RosterEntryOut(CamelModel):
    pokemon_id: int
    name: str
    nickname: str
    level: int
    types: list[str]
    date_added: datetime


class BadgeOut(CamelModel):
    name: str
    gym_name: str
    gym_leader: str
    date_earned: datetime


class TrainerOut(CamelModel):
    id: int
    name: str
    email: str
    pokemon: list[RosterEntryOut]
    badges: list[BadgeOut]
    created_at: datetime
    updated_at: datetime


class GymMemberOut(CamelModel):
    id: int
    name: str
    email: Optional[str] = None
    badges: list[BadgeOut]
    pokemon: list[RosterEntryOut]


class GymOut(CamelModel):
    id: int
    gym_name: str
    gym_leader: str
    gym_badge: str
    gym_members: list[GymMemberOut]


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


# --- Builders ---

def roster_entry_out(entry: RosterEntry) -> RosterEntryOut:
    return RosterEntryOut(
        pokemon_id=entry.pokemon_id,
        name=entry.name,
        nickname=entry.nickname,
        level=entry.level,
        types=list(entry.types or []),
        date_added=entry.date_added,
    )


def team_out(entries: list[RosterEntry]) -> list[RosterEntryOut]:
    return [roster_entry_out(e) for e in entries]


def badge_out(badge: Badge) -> BadgeOut:
    return BadgeOut(
        name=badge.name,
        gym_name=badge.gym_name,
        gym_leader=badge.gym_leader,
        date_earned=badge.date_earned,
    )


def badges_out(badges: list[Badge]) -> list[BadgeOut]:
    return [badge_out(b) for b in badges]


def trainer_out(trainer: Trainer) -> TrainerOut:
    """Profile view. The password hash never leaves the server."""
    return TrainerOut(
        id=trainer.id,
        name=trainer.name,
        email=trainer.email,
        pokemon=team_out(trainer.pokemon),
        badges=badges_out(trainer.badges),
        created_at=trainer.created_at,
        updated_at=trainer.updated_at,
    )


def gym_member_out(trainer: Trainer, include_email: bool = False) -> GymMemberOut:
    return GymMemberOut(
        id=trainer.id,
        name=trainer.name,
        email=trainer.email if include_email else None,
        badges=badges_out(trainer.badges),
        pokemon=team_out(trainer.pokemon),
    )


def gym_out(gym: Gym, members: list[Trainer], include_email: bool = False) -> GymOut:
    """
    Gym with its members projected.

    List views show name, badges and team per member; the detail view adds
    the email address.
    """
    return GymOut(
        id=gym.id,
        gym_name=gym.gym_name,
        gym_leader=gym.gym_leader,
        gym_badge=gym.gym_badge,
        gym_members=[gym_member_out(t, include_email) for t in members],
    )
