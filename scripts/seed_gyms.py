"""
Seed the gyms table from data/gyms.json.
"""
import json
import logging
from pathlib import Path

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from pokegym.database import create_db_and_tables, engine
from pokegym.models.gym import Gym

PROJECT_ROOT = Path(__file__).resolve().parents[1]

logger = logging.getLogger(__name__)


def load_gyms_from_json(json_path: Path) -> list[dict]:
    """Load gym data from JSON file."""
    with open(json_path, "r", encoding="utf-8") as f:
        return json.load(f)


def seed_gyms(session: Session, gyms_data: list[dict]) -> int:
    """
    Upsert gyms by name. Leader and badge of existing gyms are overwritten;
    members are left alone. Each gym is committed on its own, so a row whose
    badge already belongs to another gym is logged and skipped.
    Returns the number of gyms inserted/updated.
    """
    count = 0
    for gym in gyms_data:
        existing = session.exec(
            select(Gym).where(Gym.gym_name == gym["gym_name"])
        ).first()

        if existing:
            existing.gym_leader = gym["gym_leader"]
            existing.gym_badge = gym["gym_badge"]
            session.add(existing)
        else:
            session.add(
                Gym(
                    gym_name=gym["gym_name"],
                    gym_leader=gym["gym_leader"],
                    gym_badge=gym["gym_badge"],
                )
            )

        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.warning(
                "Skipping %s: badge %r is already held by another gym",
                gym["gym_name"],
                gym["gym_badge"],
            )
            continue
        count += 1

    return count


def main(json_path: Path | None = None):
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if json_path is None:
        json_path = PROJECT_ROOT / "data" / "gyms.json"

    logger.info("Creating database tables...")
    create_db_and_tables()

    logger.info("Seeding gyms from %s...", json_path)
    with Session(engine) as session:
        count = seed_gyms(session, load_gyms_from_json(json_path))
    logger.info("Done! %d gyms seeded.", count)


if __name__ == "__main__":
    main()
