"""
FastAPI dependencies - managers bound to the request's session, and auth.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from pokegym import config
from pokegym.database import get_session
from pokegym.models.trainer import Trainer
from pokegym.pokeapi import PokeAPIClient, get_pokeapi_client
from pokegym.services.auth import AuthGateway
from pokegym.services.badges import BadgeManager
from pokegym.services.gyms import GymManager
from pokegym.services.roster import RosterManager

# auto_error=False so a missing header reaches AuthGateway.resolve
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_gateway(session: Session = Depends(get_session)) -> AuthGateway:
    return AuthGateway(
        session,
        secret=config.JWT_SECRET,
        algorithm=config.JWT_ALGORITHM,
        expire_minutes=config.JWT_EXPIRE_MINUTES,
    )


def get_current_trainer(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthGateway = Depends(get_auth_gateway),
) -> Trainer:
    token = credentials.credentials if credentials else None
    return auth.resolve(token)


def get_roster_manager(
    session: Session = Depends(get_session),
    pokeapi: PokeAPIClient = Depends(get_pokeapi_client),
) -> RosterManager:
    return RosterManager(session, pokeapi)


def get_gym_manager(session: Session = Depends(get_session)) -> GymManager:
    return GymManager(session)


def get_badge_manager(session: Session = Depends(get_session)) -> BadgeManager:
    return BadgeManager(session)
