"""
Auth router - trainer registration and login.
"""
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from pokegym.dependencies import get_auth_gateway
from pokegym.services.auth import AuthGateway

router = APIRouter(prefix="/api/auth", tags=["auth"])


# --- Request/Response Models ---

class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100, description="Trainer name")
    email: EmailStr
    password: str = Field(min_length=8, description="At least 8 characters")


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    token: str


# --- Endpoints ---

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    auth: AuthGateway = Depends(get_auth_gateway),
):
    auth.register(request.name, request.email, request.password)
    return MessageResponse(message="Trainer created successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    auth: AuthGateway = Depends(get_auth_gateway),
):
    """Exchange email and password for a bearer token."""
    return LoginResponse(token=auth.login(request.email, request.password))
