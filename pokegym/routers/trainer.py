"""
Trainer router - the authenticated trainer's profile and Pokemon team.
"""
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from pokegym.dependencies import get_current_trainer, get_roster_manager
from pokegym.models.trainer import Trainer
from pokegym.schemas import (
    RosterEntryOut,
    TrainerOut,
    roster_entry_out,
    team_out,
    trainer_out,
)
from pokegym.services.roster import RosterManager

router = APIRouter(prefix="/api/trainer", tags=["trainer"])


# --- Request/Response Models ---

class AddPokemonRequest(BaseModel):
    name: str = Field(min_length=1, description="Pokemon name or Pokedex number")


class UpdatePokemonRequest(BaseModel):
    nickname: Optional[str] = Field(default=None, max_length=50)
    level: Optional[int] = Field(default=None, ge=1, le=100)


class ProfileResponse(BaseModel):
    trainer: TrainerOut


class TeamResponse(BaseModel):
    message: str
    team: list[RosterEntryOut]


class PokemonResponse(BaseModel):
    message: str
    pokemon: RosterEntryOut


# --- Endpoints ---

@router.get("", response_model=ProfileResponse)
def get_profile(trainer: Trainer = Depends(get_current_trainer)):
    return ProfileResponse(trainer=trainer_out(trainer))


@router.post("/pokemon/add", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
def add_pokemon(
    request: AddPokemonRequest,
    trainer: Trainer = Depends(get_current_trainer),
    roster: RosterManager = Depends(get_roster_manager),
):
    """
    Add a Pokemon to the team by name.

    The name is looked up in PokeAPI; the team holds at most 6 Pokemon and
    never the same species twice.
    """
    team = roster.add_pokemon(trainer.id, request.name.strip())
    return TeamResponse(message="Pokemon added to team successfully", team=team_out(team))


@router.put("/pokemon/update/{pokemon_id}", response_model=PokemonResponse)
def update_pokemon(
    pokemon_id: int,
    request: UpdatePokemonRequest,
    trainer: Trainer = Depends(get_current_trainer),
    roster: RosterManager = Depends(get_roster_manager),
):
    """Update nickname and/or level. Omitted fields keep their value."""
    entry = roster.update_pokemon(
        trainer.id,
        pokemon_id,
        nickname=request.nickname,
        level=request.level,
    )
    return PokemonResponse(message="Pokemon updated successfully", pokemon=roster_entry_out(entry))


@router.delete("/pokemon/remove/{pokemon_id}", response_model=TeamResponse)
def remove_pokemon(
    pokemon_id: int,
    trainer: Trainer = Depends(get_current_trainer),
    roster: RosterManager = Depends(get_roster_manager),
):
    team = roster.remove_pokemon(trainer.id, pokemon_id)
    return TeamResponse(message="Pokemon removed from team successfully", team=team_out(team))
