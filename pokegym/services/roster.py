"""
Roster manager - a trainer's team of up to six Pokemon.

Invariants kept here:
- a roster never holds more than MAX_ROSTER_SIZE entries
- no two entries share a catalog id (also backed by uq_trainer_pokemon)
- removal is stable: remaining entries keep their relative order
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from pokegym.errors import (
    DuplicatePokemon,
    PokemonLookupFailed,
    PokemonNotFound,
    PokemonNotInRoster,
    RosterFull,
    TrainerNotFound,
)
from pokegym.models.roster_entry import MAX_ROSTER_SIZE, RosterEntry
from pokegym.models.trainer import Trainer
from pokegym.pokeapi import PokeAPIClient

logger = logging.getLogger(__name__)


def find_entry_index(roster: list[RosterEntry], pokemon_id: int) -> int:
    """Index of the entry with this catalog id, or -1."""
    for index, entry in enumerate(roster):
        if entry.pokemon_id == pokemon_id:
            return index
    return -1


class RosterManager:
    def __init__(self, session: Session, pokeapi: PokeAPIClient):
        self.session = session
        self.pokeapi = pokeapi

    def _get_trainer(self, trainer_id: int) -> Trainer:
        trainer = self.session.get(Trainer, trainer_id)
        if not trainer:
            raise TrainerNotFound()
        return trainer

    def _save(self, trainer: Trainer) -> None:
        trainer.touch()
        self.session.add(trainer)
        self.session.commit()
        self.session.refresh(trainer)

    def get_roster(self, trainer_id: int) -> list[RosterEntry]:
        return list(self._get_trainer(trainer_id).pokemon)

    def add_pokemon(self, trainer_id: int, name: str) -> list[RosterEntry]:
        """
        Look up a Pokemon by name and append it to the trainer's team.

        Returns the full roster in insertion order.
        """
        trainer = self._get_trainer(trainer_id)

        if len(trainer.pokemon) >= MAX_ROSTER_SIZE:
            raise RosterFull()

        try:
            creature = self.pokeapi.get_pokemon(name.lower())
        except PokemonLookupFailed as e:
            raise PokemonNotFound() from e

        if find_entry_index(trainer.pokemon, creature.id) != -1:
            raise DuplicatePokemon()

        trainer.pokemon.append(
            RosterEntry(
                pokemon_id=creature.id,
                name=creature.name,
                types=list(creature.types),
                level=1,
                nickname="",
            )
        )
        try:
            self._save(trainer)
        except IntegrityError as e:
            # Lost a race with a concurrent add of the same species
            self.session.rollback()
            raise DuplicatePokemon() from e

        logger.info("Trainer %s added %s (#%s)", trainer_id, creature.name, creature.id)
        return list(trainer.pokemon)

    def update_pokemon(
        self,
        trainer_id: int,
        pokemon_id: int,
        nickname: Optional[str] = None,
        level: Optional[int] = None,
    ) -> RosterEntry:
        """Change nickname and/or level. Arguments left as None are not touched."""
        trainer = self._get_trainer(trainer_id)

        index = find_entry_index(trainer.pokemon, pokemon_id)
        if index == -1:
            raise PokemonNotInRoster()

        entry = trainer.pokemon[index]
        if nickname is not None:
            entry.nickname = nickname
        if level is not None:
            entry.level = level

        self._save(trainer)
        self.session.refresh(entry)
        return entry

    def remove_pokemon(self, trainer_id: int, pokemon_id: int) -> list[RosterEntry]:
        """Remove one Pokemon and return the remaining roster."""
        trainer = self._get_trainer(trainer_id)

        index = find_entry_index(trainer.pokemon, pokemon_id)
        if index == -1:
            raise PokemonNotInRoster()

        del trainer.pokemon[index]
        self._save(trainer)

        logger.info("Trainer %s removed #%s", trainer_id, pokemon_id)
        return list(trainer.pokemon)
