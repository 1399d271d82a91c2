"""Request authentication and ownership checks.

``get_current_user`` resolves the ``Authorization: Bearer <token>`` header to
a ``User``. The ownership helpers check existence before ownership, so a
missing resource is a 404 and somebody else's resource is a 403.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, Path, Request
from sqlalchemy.orm import Session

from tasktrack.core.config import Settings
from tasktrack.core.database import MAX_ROW_ID, get_db
from tasktrack.core.errors import (
    AuthorizationError,
    InvalidCredential,
    MissingCredential,
    NotFoundError,
    UnknownSubject,
)
from tasktrack.core.security import decode_token
from tasktrack.models.task import Task
from tasktrack.models.task_list import TaskList
from tasktrack.models.user import User
from tasktrack.services import list_service, task_service, user_service

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def authenticate(db: Session, authorization: Optional[str], settings: Settings) -> User:
    if not authorization or not authorization.strip():
        raise MissingCredential()

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer":
        raise InvalidCredential()
    if not token:
        raise MissingCredential()

    user_id = decode_token(token, settings)
    if user_id is None:
        raise InvalidCredential()

    user = user_service.get_user(db, user_id)
    if user is None:
        raise UnknownSubject()
    return user


def get_current_user(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    authorization: Optional[str] = Header(None)
) -> User:
    return authenticate(db, authorization, settings)


def authorize_list(db: Session, list_id: int, user: User) -> TaskList:
    task_list = list_service.get_list(db, list_id)
    if task_list is None:
        raise NotFoundError("Task list not found", key="error")
    if task_list.user_id != user.id:
        logger.warning(f"User {user.id} denied access to task list {list_id}")
        raise AuthorizationError()
    return task_list


def authorize_task(db: Session, task_id: int, user: User) -> Task:
    task = task_service.get_task(db, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    if task.assignee_id != user.id:
        logger.warning(f"User {user.id} denied access to task {task_id}")
        raise AuthorizationError()
    return task


def get_owned_list(
    list_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> TaskList:
    return authorize_list(db, list_id, current_user)


def get_owned_task(
    task_id: int = Path(..., ge=1, le=MAX_ROW_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Task:
    return authorize_task(db, task_id, current_user)
