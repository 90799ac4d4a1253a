"""
Shared fixtures: an in-memory database and a PokeAPI stand-in.
"""
from datetime import datetime, timezone

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import pokegym.models  # noqa: F401  (registers the tables)
from pokegym.errors import PokemonLookupFailed
from pokegym.models.trainer import Trainer
from pokegym.pokeapi import CreatureData
from pokegym.security import hash_password

CATALOG = [
    CreatureData(id=1, name="bulbasaur", types=["grass", "poison"]),
    CreatureData(id=4, name="charmander", types=["fire"]),
    CreatureData(id=7, name="squirtle", types=["water"]),
    CreatureData(id=16, name="pidgey", types=["normal", "flying"]),
    CreatureData(id=25, name="pikachu", types=["electric"]),
    CreatureData(id=133, name="eevee", types=["normal"]),
    CreatureData(id=143, name="snorlax", types=["normal"]),
    CreatureData(id=150, name="mewtwo", types=["psychic"]),
]


class FakePokeAPI:
    """Resolves names or ids from CATALOG, records every lookup."""

    def __init__(self, catalog=None):
        self.catalog = list(catalog or CATALOG)
        self.calls = []

    def get_pokemon(self, identifier):
        key = str(identifier).strip().lower()
        self.calls.append(key)
        for creature in self.catalog:
            if key in (creature.name, str(creature.id)):
                return creature
        raise PokemonLookupFailed(key, "404 Client Error: Not Found")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def pokeapi():
    return FakePokeAPI()


@pytest.fixture
def make_trainer(session):
    """Factory for persisted trainers."""
    counter = {"n": 0}

    def _make(name=None, email=None, password="pallet-town-1"):
        counter["n"] += 1
        trainer = Trainer(
            name=name or f"Trainer {counter['n']}",
            email=email or f"trainer{counter['n']}@example.com",
            password_hash=hash_password(password),
        )
        session.add(trainer)
        session.commit()
        session.refresh(trainer)
        return trainer

    return _make


LONG_AGO = datetime(2000, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def backdate(session):
    """Push a trainer's updated_at back to LONG_AGO."""
    def _backdate(trainer):
        trainer.updated_at = LONG_AGO
        session.add(trainer)
        session.commit()
        return trainer

    return _backdate


def touched_since(trainer, moment=LONG_AGO):
    # SQLite hands datetimes back without tzinfo; they are stored as UTC.
    updated = trainer.updated_at
    if updated.tzinfo is None:
        updated = updated.replace(tzinfo=timezone.utc)
    return updated > moment
