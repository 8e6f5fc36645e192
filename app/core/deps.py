"""
FastAPI dependencies for authentication and authorization.

Reads are public; creating, changing and deleting companies and jobs
requires an admin. Both a missing/invalid token and a non-admin user
yield 401.
"""

from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import NotFoundError, UnauthorizedError
from app.core.security import decode_token
from app.crud import user as user_crud

# HTTP Bearer token scheme (Authorization: Bearer <token>). auto_error is off
# so a missing header is reported as 401 by us rather than by FastAPI.
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    """
    Extract and validate the current user from the JWT token.

    This dependency:
    1. Extracts the Bearer token from the Authorization header
    2. Decodes and validates the JWT
    3. Fetches the user from the database

    Raises:
        UnauthorizedError: If the token is missing or invalid, or the user no longer exists
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    username: Optional[str] = payload.get("sub")
    if username is None:
        raise UnauthorizedError("Could not validate credentials")

    try:
        return user_crud.get(db, username)
    except NotFoundError:
        raise UnauthorizedError("Could not validate credentials")


async def get_admin_user(
    user: Dict[str, Any] = Depends(get_current_user),
) -> Dict[str, Any]:
    """
    Get the current user and ensure they are an admin.

    Raises:
        UnauthorizedError: If the user is not an admin
    """
    if not user["is_admin"]:
        raise UnauthorizedError("Admin privileges required")

    return user
