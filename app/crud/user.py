"""
CRUD operations for users, plus password authentication.

Records never include the password hash, except inside authenticate().
"""

import logging
from typing import Any, Dict

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.models.user import User
from app.schemas.user import UserRegisterRequest

logger = logging.getLogger(__name__)

users = User.__table__

USER_COLUMNS = (
    users.c.username,
    users.c.first_name,
    users.c.last_name,
    users.c.email,
    users.c.is_admin,
)


def register(db: Session, user_data: UserRegisterRequest, is_admin: bool = False) -> Dict[str, Any]:
    """
    Create a user with a bcrypt-hashed password.

    Raises:
        BadRequestError: If the username is taken
    """
    stmt = (
        insert(users)
        .values(
            username=user_data.username,
            password=get_password_hash(user_data.password),
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            email=user_data.email,
            is_admin=is_admin,
        )
        .returning(*USER_COLUMNS)
    )

    try:
        user = dict(db.execute(stmt).mappings().one())
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate username: {user_data.username}")

    logger.info(f"New user registered: {user['username']}")
    return user


def authenticate(db: Session, username: str, password: str) -> Dict[str, Any]:
    """
    Check a username/password pair.

    Returns:
        The user record (without password)

    Raises:
        UnauthorizedError: If the user is unknown or the password is wrong
    """
    row = db.execute(
        select(*USER_COLUMNS, users.c.password).where(users.c.username == username)
    ).mappings().first()

    if row is None or not verify_password(password, row["password"]):
        raise UnauthorizedError("Invalid username/password")

    user = dict(row)
    del user["password"]
    return user


def get(db: Session, username: str) -> Dict[str, Any]:
    """
    Retrieve a user by username.

    Raises:
        NotFoundError: If no user has this username
    """
    row = db.execute(select(*USER_COLUMNS).where(users.c.username == username)).mappings().first()
    if row is None:
        raise NotFoundError(f"No user: {username}")
    return dict(row)
