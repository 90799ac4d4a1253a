"""
Gym membership manager - creating gyms and the join/leave set semantics.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, or_, select

from pokegym.errors import (
    AlreadyMember,
    DuplicateBadgeName,
    DuplicateGymName,
    GymNotFound,
    NotMember,
    ValidationError,
)
from pokegym.models.gym import Gym
from pokegym.models.gym_member import GymMember
from pokegym.models.trainer import Trainer

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass
class GymPage:
    items: list[Gym]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        if self.limit < 1:
            return 0
        return math.ceil(self.total / self.limit)


def search_filter(term: str):
    """Case-insensitive literal substring match on name, leader or badge."""
    needle = term.lower()
    return or_(
        func.lower(Gym.gym_name).contains(needle, autoescape=True),
        func.lower(Gym.gym_leader).contains(needle, autoescape=True),
        func.lower(Gym.gym_badge).contains(needle, autoescape=True),
    )


class GymManager:
    def __init__(self, session: Session):
        self.session = session

    def _find_by_name(self, gym_name: str) -> Optional[Gym]:
        return self.session.exec(select(Gym).where(Gym.gym_name == gym_name)).first()

    def _find_by_badge(self, gym_badge: str) -> Optional[Gym]:
        return self.session.exec(select(Gym).where(Gym.gym_badge == gym_badge)).first()

    def _membership(self, gym_id: int, trainer_id: int) -> Optional[GymMember]:
        return self.session.exec(
            select(GymMember)
            .where(GymMember.gym_id == gym_id)
            .where(GymMember.trainer_id == trainer_id)
        ).first()

    def get_gym(self, gym_id: int) -> Gym:
        gym = self.session.get(Gym, gym_id)
        if not gym:
            raise GymNotFound()
        return gym

    def create_gym(self, gym_name: str, gym_leader: str, gym_badge: str) -> Gym:
        """
        Create a gym with an empty member set.

        Name and badge are unique columns; the lookups below only decide which
        conflict to report. A concurrent create that slips past them fails on
        insert and is reported the same way.
        """
        if self._find_by_name(gym_name):
            raise DuplicateGymName()
        if self._find_by_badge(gym_badge):
            raise DuplicateBadgeName()

        gym = Gym(gym_name=gym_name, gym_leader=gym_leader, gym_badge=gym_badge)
        self.session.add(gym)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if self._find_by_badge(gym_badge) and not self._find_by_name(gym_name):
                raise DuplicateBadgeName() from e
            raise DuplicateGymName() from e
        self.session.refresh(gym)

        logger.info("Created gym %s (%s)", gym.id, gym.gym_name)
        return gym

    def members(self, gym_id: int) -> list[Trainer]:
        """Trainers in the gym, in join order."""
        return list(
            self.session.exec(
                select(Trainer)
                .join(GymMember, GymMember.trainer_id == Trainer.id)
                .where(GymMember.gym_id == gym_id)
                .order_by(GymMember.id)
            ).all()
        )

    def member_ids(self, gym_id: int) -> list[int]:
        return list(
            self.session.exec(
                select(GymMember.trainer_id)
                .where(GymMember.gym_id == gym_id)
                .order_by(GymMember.id)
            ).all()
        )

    def join(self, gym_id: int, trainer_id: int) -> Gym:
        gym = self.get_gym(gym_id)

        if self._membership(gym.id, trainer_id):
            raise AlreadyMember()

        self.session.add(GymMember(gym_id=gym.id, trainer_id=trainer_id))
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise AlreadyMember() from e
        self.session.refresh(gym)

        logger.info("Trainer %s joined gym %s", trainer_id, gym_id)
        return gym

    def leave(self, gym_id: int, trainer_id: int) -> Gym:
        gym = self.get_gym(gym_id)

        membership = self._membership(gym.id, trainer_id)
        if not membership:
            raise NotMember()

        self.session.delete(membership)
        self.session.commit()
        self.session.refresh(gym)

        logger.info("Trainer %s left gym %s", trainer_id, gym_id)
        return gym

    def list_gyms(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        search: Optional[str] = None,
    ) -> GymPage:
        """Gyms sorted by name, 1-indexed pages, optionally filtered by search."""
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be at least 1")
        statement = select(Gym)
        count_statement = select(func.count()).select_from(Gym)
        if search:
            statement = statement.where(search_filter(search))
            count_statement = count_statement.where(search_filter(search))

        items = self.session.exec(
            statement.order_by(Gym.gym_name).offset((page - 1) * limit).limit(limit)
        ).all()
        total = self.session.exec(count_statement).one()

        return GymPage(items=list(items), page=page, limit=limit, total=total)
