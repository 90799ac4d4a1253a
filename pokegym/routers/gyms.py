"""
Gyms router - browsing gyms, creating them, membership, and badges.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from pokegym.dependencies import get_badge_manager, get_current_trainer, get_gym_manager
from pokegym.models.trainer import Trainer
from pokegym.schemas import BadgeOut, CamelModel, GymOut, Pagination, badges_out, gym_out
from pokegym.services.badges import BadgeManager
from pokegym.services.gyms import DEFAULT_LIMIT, DEFAULT_PAGE, GymManager

router = APIRouter(prefix="/api/gyms", tags=["gyms"])


# --- Request/Response Models ---

class CreateGymRequest(CamelModel):
    gym_name: str = Field(min_length=2, max_length=100)
    gym_leader: str = Field(min_length=2, max_length=100)
    gym_badge: str = Field(min_length=2, max_length=100)


class ClaimBadgeRequest(CamelModel):
    trainer_id: int = Field(description="Trainer receiving the badge")


class GymListResponse(BaseModel):
    gyms: list[GymOut]
    pagination: Pagination


class GymDetailResponse(BaseModel):
    gym: GymOut


class GymActionResponse(BaseModel):
    message: str
    gym: GymOut


class BadgesResponse(BaseModel):
    message: str
    badges: list[BadgeOut]


# --- Endpoints ---

@router.get("", response_model=GymListResponse, response_model_exclude_none=True)
def list_gyms(
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=100),
    search: Optional[str] = Query(default=None, max_length=100),
    gyms: GymManager = Depends(get_gym_manager),
):
    """
    List gyms sorted by name.

    `search` matches gym name, leader, or badge (case-insensitive substring).
    """
    result = gyms.list_gyms(page=page, limit=limit, search=search)
    return GymListResponse(
        gyms=[gym_out(g, gyms.members(g.id)) for g in result.items],
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            pages=result.pages,
        ),
    )


@router.get("/{gym_id}", response_model=GymDetailResponse)
def get_gym(
    gym_id: int,
    gyms: GymManager = Depends(get_gym_manager),
):
    gym = gyms.get_gym(gym_id)
    return GymDetailResponse(gym=gym_out(gym, gyms.members(gym.id), include_email=True))


@router.post("", response_model=GymActionResponse, status_code=status.HTTP_201_CREATED)
def create_gym(
    request: CreateGymRequest,
    trainer: Trainer = Depends(get_current_trainer),
    gyms: GymManager = Depends(get_gym_manager),
):
    """Create a gym. Gym names and badge names are unique."""
    gym = gyms.create_gym(
        request.gym_name.strip(),
        request.gym_leader.strip(),
        request.gym_badge.strip(),
    )
    return GymActionResponse(message="Gym created successfully", gym=gym_out(gym, []))


@router.post("/{gym_id}/join", response_model=GymActionResponse)
def join_gym(
    gym_id: int,
    trainer: Trainer = Depends(get_current_trainer),
    gyms: GymManager = Depends(get_gym_manager),
):
    gym = gyms.join(gym_id, trainer.id)
    return GymActionResponse(
        message=f"Successfully joined {gym.gym_name}",
        gym=gym_out(gym, gyms.members(gym.id)),
    )


@router.post("/{gym_id}/leave", response_model=GymActionResponse)
def leave_gym(
    gym_id: int,
    trainer: Trainer = Depends(get_current_trainer),
    gyms: GymManager = Depends(get_gym_manager),
):
    gym = gyms.leave(gym_id, trainer.id)
    return GymActionResponse(
        message=f"Successfully left {gym.gym_name}",
        gym=gym_out(gym, gyms.members(gym.id)),
    )


@router.post("/{gym_id}/claim", response_model=BadgesResponse)
def claim_badge(
    gym_id: int,
    request: ClaimBadgeRequest,
    trainer: Trainer = Depends(get_current_trainer),
    badges: BadgeManager = Depends(get_badge_manager),
):
    """Award this gym's badge to the trainer named in the body."""
    earned = badges.claim(gym_id, request.trainer_id)
    latest = earned[-1]
    return BadgesResponse(
        message=f"Successfully assigned {latest.name} badge to {latest.trainer.name}",
        badges=badges_out(earned),
    )
