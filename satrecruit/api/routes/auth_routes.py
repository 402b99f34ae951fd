"""
Authentication Routes

POST /auth/login - Login and get JWT token
GET /auth/me - Get current admin info
"""

from fastapi import APIRouter, Depends

from satrecruit.core.auth import authenticate_admin, get_current_admin
from satrecruit.schemas.schemas import AdminResponse, LoginRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    """
    Login and receive JWT access token.

    Include token in admin requests: Authorization: Bearer <token>
    """
    token = authenticate_admin(request.username, request.password)
    return TokenResponse(access_token=token)


@router.get("/me", response_model=AdminResponse)
async def get_me(admin: dict = Depends(get_current_admin)):
    """Get current authenticated admin."""
    return AdminResponse(**admin)
