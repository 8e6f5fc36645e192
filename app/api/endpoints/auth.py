"""
Authentication endpoints for user registration and login.

- POST /register: Create a (non-admin) user account and return a token
- POST /token: Authenticate and receive a JWT access token
- GET /me: Get the current user's profile
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.schemas.user import (
    TokenResponse,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


def _token_for(user: Dict[str, Any]) -> TokenResponse:
    access_token = create_access_token(data={"sub": user["username"], "is_admin": user["is_admin"]})
    return TokenResponse(access_token=access_token, token_type="bearer")


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    Self-registered users are never admins. Returns a JWT for immediate use.
    """
    new_user = user_crud.register(db, request)
    return _token_for(new_user)


@router.post("/token", response_model=TokenResponse)
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db)
):
    """Authenticate with username/password and return a JWT access token."""
    user = user_crud.authenticate(db, request.username, request.password)
    logger.info(f"User logged in: {user['username']}")
    return _token_for(user)


@router.get("/me", response_model=UserResponse)
def get_current_user_profile(
    current_user: Dict[str, Any] = Depends(get_current_user)
):
    """Get the authenticated user's profile."""
    return current_user
