"""User registration and credential checks"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tasktrack.core.errors import AuthenticationError, ValidationError
from tasktrack.models.user import User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, username: Optional[str], password: Optional[str], email: Optional[str] = None) -> User:
    if not username or not password:
        raise ValidationError("username and password required")

    if get_user_by_username(db, username):
        raise ValidationError("username taken")

    if email and get_user_by_email(db, email):
        raise ValidationError("email taken")

    user = User(username=username, email=email or None)
    user.set_password(password)

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # another registration took the name or email after the checks above
        db.rollback()
        logger.warning(f"Concurrent registration conflict for username {username!r}")
        if db.query(User).filter(User.username == username).first():
            raise ValidationError("username taken")
        if email and db.query(User).filter(User.email == email).first():
            raise ValidationError("email taken")
        raise
    db.refresh(user)

    logger.info(f"Registered user {user.id} ({user.username})")
    return user


def authenticate_user(db: Session, username: Optional[str], password: Optional[str]) -> User:
    if not username or not password:
        raise ValidationError("username and password required")

    user = get_user_by_username(db, username)
    if not user or not user.verify_password(password):
        logger.warning(f"Failed login for username {username!r}")
        raise AuthenticationError("invalid credentials")

    return user
