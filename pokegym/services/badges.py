"""
Badge issuance - at most one badge per gym per trainer.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from pokegym.errors import AlreadyHasBadge, GymNotFound, TrainerNotFound
from pokegym.models.badge import Badge
from pokegym.models.gym import Gym
from pokegym.models.trainer import Trainer

logger = logging.getLogger(__name__)


class BadgeManager:
    def __init__(self, session: Session):
        self.session = session

    def claim(self, gym_id: int, trainer_id: int) -> list[Badge]:
        """
        Award the gym's badge to a trainer and return their badge collection.

        Any authenticated caller may award a badge to any trainer; membership
        in the gym is not required.
        """
        gym = self.session.get(Gym, gym_id)
        if not gym:
            raise GymNotFound()

        trainer = self.session.get(Trainer, trainer_id)
        if not trainer:
            raise TrainerNotFound("Target trainer not found")

        if any(badge.name == gym.gym_badge for badge in trainer.badges):
            raise AlreadyHasBadge()

        trainer.badges.append(
            Badge(
                name=gym.gym_badge,
                gym_name=gym.gym_name,
                gym_leader=gym.gym_leader,
            )
        )
        trainer.touch()
        self.session.add(trainer)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise AlreadyHasBadge() from e
        self.session.refresh(trainer)

        logger.info("Awarded %s to trainer %s", gym.gym_badge, trainer_id)
        return list(trainer.badges)
