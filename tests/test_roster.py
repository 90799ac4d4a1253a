"""
Tests for the roster manager.
"""
import random

import pytest

from pokegym.errors import (
    DuplicatePokemon,
    PokemonLookupFailed,
    PokemonNotFound,
    PokemonNotInRoster,
    RosterFull,
    TrainerNotFound,
)
from pokegym.models.roster_entry import MAX_ROSTER_SIZE
from pokegym.services.roster import RosterManager, find_entry_index
from tests.conftest import touched_since


@pytest.fixture
def roster(session, pokeapi):
    return RosterManager(session, pokeapi)


@pytest.fixture
def trainer(make_trainer):
    return make_trainer(name="Ash", email="ash@example.com")


def ids(entries):
    return [e.pokemon_id for e in entries]


# -----------------------------------------------------------------------------
# add_pokemon
# -----------------------------------------------------------------------------

class TestAddPokemon:

    def test_add_to_empty_roster(self, roster, trainer):
        team = roster.add_pokemon(trainer.id, "pikachu")

        assert len(team) == 1
        entry = team[0]
        assert entry.pokemon_id == 25
        assert entry.name == "pikachu"
        assert entry.level == 1
        assert entry.nickname == ""
        assert entry.types == ["electric"]
        assert entry.date_added is not None

    def test_name_is_case_insensitive(self, roster, trainer, pokeapi):
        team = roster.add_pokemon(trainer.id, "PiKaChU")

        assert ids(team) == [25]
        assert pokeapi.calls == ["pikachu"]

    def test_insertion_order_preserved(self, roster, trainer):
        for name in ["squirtle", "bulbasaur", "pikachu"]:
            team = roster.add_pokemon(trainer.id, name)

        assert ids(team) == [7, 1, 25]

    def test_seventh_pokemon_rejected(self, roster, trainer, pokeapi):
        for name in ["bulbasaur", "charmander", "squirtle", "pidgey", "pikachu", "eevee"]:
            roster.add_pokemon(trainer.id, name)
        lookups = len(pokeapi.calls)

        with pytest.raises(RosterFull):
            roster.add_pokemon(trainer.id, "snorlax")

        assert ids(roster.get_roster(trainer.id)) == [1, 4, 7, 16, 25, 133]
        # Capacity is checked before the catalog is consulted
        assert len(pokeapi.calls) == lookups

    def test_duplicate_by_name(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")

        with pytest.raises(DuplicatePokemon):
            roster.add_pokemon(trainer.id, "Pikachu")

        assert ids(roster.get_roster(trainer.id)) == [25]

    def test_duplicate_by_catalog_id(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")

        with pytest.raises(DuplicatePokemon):
            roster.add_pokemon(trainer.id, "25")

    def test_unknown_pokemon(self, roster, trainer):
        with pytest.raises(PokemonNotFound) as exc_info:
            roster.add_pokemon(trainer.id, "missingno")

        assert isinstance(exc_info.value.__cause__, PokemonLookupFailed)
        assert roster.get_roster(trainer.id) == []

    def test_unknown_trainer(self, roster):
        with pytest.raises(TrainerNotFound):
            roster.add_pokemon(999, "pikachu")

    def test_touches_updated_at(self, roster, trainer, session, backdate):
        backdate(trainer)

        roster.add_pokemon(trainer.id, "eevee")

        session.refresh(trainer)
        assert touched_since(trainer)

    def test_rosters_are_per_trainer(self, roster, make_trainer):
        ash = make_trainer(name="Ash")
        gary = make_trainer(name="Gary")

        roster.add_pokemon(ash.id, "pikachu")
        roster.add_pokemon(gary.id, "pikachu")

        assert ids(roster.get_roster(ash.id)) == [25]
        assert ids(roster.get_roster(gary.id)) == [25]


# -----------------------------------------------------------------------------
# update_pokemon
# -----------------------------------------------------------------------------

class TestUpdatePokemon:

    def test_level_only_keeps_nickname(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")
        roster.update_pokemon(trainer.id, 25, nickname="Sparky")

        entry = roster.update_pokemon(trainer.id, 25, level=10)

        assert entry.nickname == "Sparky"
        assert entry.level == 10

    def test_nickname_only_keeps_level(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")
        roster.update_pokemon(trainer.id, 25, level=42)

        entry = roster.update_pokemon(trainer.id, 25, nickname="Zappy")

        assert entry.level == 42
        assert entry.nickname == "Zappy"

    def test_empty_nickname_is_applied(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")
        roster.update_pokemon(trainer.id, 25, nickname="Sparky")

        entry = roster.update_pokemon(trainer.id, 25, nickname="")

        assert entry.nickname == ""

    def test_only_target_entry_changes(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")
        roster.add_pokemon(trainer.id, "eevee")

        roster.update_pokemon(trainer.id, 133, level=30)

        levels = {e.pokemon_id: e.level for e in roster.get_roster(trainer.id)}
        assert levels == {25: 1, 133: 30}

    def test_not_in_roster(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")

        with pytest.raises(PokemonNotInRoster):
            roster.update_pokemon(trainer.id, 150, level=5)


# -----------------------------------------------------------------------------
# remove_pokemon
# -----------------------------------------------------------------------------

class TestRemovePokemon:

    def test_remove_keeps_relative_order(self, roster, trainer):
        for name in ["bulbasaur", "charmander", "squirtle", "pikachu"]:
            roster.add_pokemon(trainer.id, name)

        team = roster.remove_pokemon(trainer.id, 4)

        assert ids(team) == [1, 7, 25]
        assert ids(roster.get_roster(trainer.id)) == [1, 7, 25]

    def test_remove_missing_leaves_roster_unchanged(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")

        with pytest.raises(PokemonNotInRoster):
            roster.remove_pokemon(trainer.id, 1)

        assert ids(roster.get_roster(trainer.id)) == [25]

    def test_touches_updated_at(self, roster, trainer, session, backdate):
        roster.add_pokemon(trainer.id, "pikachu")
        backdate(trainer)

        roster.remove_pokemon(trainer.id, 25)

        session.refresh(trainer)
        assert touched_since(trainer)

    def test_removed_pokemon_can_be_added_again(self, roster, trainer):
        roster.add_pokemon(trainer.id, "pikachu")
        roster.add_pokemon(trainer.id, "eevee")
        roster.remove_pokemon(trainer.id, 25)

        team = roster.add_pokemon(trainer.id, "pikachu")

        assert ids(team) == [133, 25]

    def test_full_roster_accepts_after_removal(self, roster, trainer):
        for name in ["bulbasaur", "charmander", "squirtle", "pidgey", "pikachu", "eevee"]:
            roster.add_pokemon(trainer.id, name)
        roster.remove_pokemon(trainer.id, 16)

        team = roster.add_pokemon(trainer.id, "snorlax")

        assert ids(team) == [1, 4, 7, 25, 133, 143]


# -----------------------------------------------------------------------------
# Invariants under arbitrary sequences
# -----------------------------------------------------------------------------

def test_random_operations_keep_roster_invariants(roster, trainer, pokeapi):
    rng = random.Random(1996)
    names = [c.name for c in pokeapi.catalog]
    catalog_ids = [c.id for c in pokeapi.catalog]

    for _ in range(120):
        try:
            if rng.random() < 0.6:
                roster.add_pokemon(trainer.id, rng.choice(names))
            else:
                roster.remove_pokemon(trainer.id, rng.choice(catalog_ids))
        except (RosterFull, DuplicatePokemon, PokemonNotInRoster):
            pass

        team = ids(roster.get_roster(trainer.id))
        assert len(team) <= MAX_ROSTER_SIZE
        assert len(team) == len(set(team))


def test_find_entry_index(roster, trainer):
    team = []
    for name in ["pikachu", "eevee"]:
        team = roster.add_pokemon(trainer.id, name)

    assert find_entry_index(team, 133) == 1
    assert find_entry_index(team, 1) == -1
