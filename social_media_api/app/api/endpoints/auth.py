"""
Authentication endpoints.

Registration and login return a bearer token together with the public
user view.  ``/profile`` is the only protected route here and resolves
the token's user id against the account store.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status

from social_media_api.app.api.deps import get_user_service
from social_media_api.app.core.security import get_current_user
from social_media_api.app.schemas.user import TokenIdentity, UserLogin, UserRegister
from social_media_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    payload: Optional[UserRegister] = None,
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Register a new account and log it in.

    Requires ``username``, ``email`` and ``password``.  Responds 400 when
    a field is missing or when the email or username is already taken.
    """
    token, user = await service.register(payload or UserRegister())
    return {
        "success": True,
        "message": "User registered successfully",
        "token": token,
        "user": user.model_dump(),
    }


@router.post("/login")
async def login(
    payload: Optional[UserLogin] = None,
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Exchange email and password for a bearer token."""
    token, user = await service.login(payload or UserLogin())
    return {
        "success": True,
        "message": "Login successful",
        "token": token,
        "user": user.model_dump(),
    }


@router.get("/profile")
async def profile(
    current_user: TokenIdentity = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    user = await service.get_profile(current_user)
    return {"success": True, "data": user.model_dump()}
