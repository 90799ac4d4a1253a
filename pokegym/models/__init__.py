"""
SQLModel models for trainers, their rosters and badges, and gyms.
"""
from pokegym.models.trainer import Trainer
from pokegym.models.roster_entry import MAX_ROSTER_SIZE, RosterEntry
from pokegym.models.badge import Badge
from pokegym.models.gym import Gym
from pokegym.models.gym_member import GymMember

__all__ = [
    "Trainer",
    "RosterEntry",
    "MAX_ROSTER_SIZE",
    "Badge",
    "Gym",
    "GymMember",
]
