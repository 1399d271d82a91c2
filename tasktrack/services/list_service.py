"""Task list service"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tasktrack.core.errors import StorageError, ValidationError
from tasktrack.models.task import Task
from tasktrack.models.task_list import TaskList
from tasktrack.schemas.task_list import TaskListUpdate

logger = logging.getLogger(__name__)


def _require_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise ValidationError("Name is required", key="error")
    return name


def create_list(db: Session, owner_id: int, name: Optional[str], description: Optional[str] = None) -> TaskList:
    task_list = TaskList(
        user_id=owner_id,
        name=_require_name(name),
        description=description or None
    )
    db.add(task_list)
    db.commit()
    db.refresh(task_list)
    return task_list


def list_for_owner(db: Session, owner_id: int) -> List[TaskList]:
    # newest first, later insert wins a created_at tie
    return db.query(TaskList).filter(
        TaskList.user_id == owner_id
    ).order_by(TaskList.created_at.desc(), TaskList.id.desc()).all()


def get_list(db: Session, list_id: int) -> Optional[TaskList]:
    return db.query(TaskList).filter(TaskList.id == list_id).first()


def get_owned_list(db: Session, list_id: int, owner_id: int) -> Optional[TaskList]:
    """Return the list only when it exists and belongs to ``owner_id``."""
    return db.query(TaskList).filter(
        TaskList.id == list_id,
        TaskList.user_id == owner_id
    ).first()


def update_list(db: Session, task_list: TaskList, changes: TaskListUpdate) -> TaskList:
    """Apply name/description changes. Ownership is checked by the caller."""
    fields = changes.model_dump(exclude_unset=True)

    if "name" in fields:
        task_list.name = _require_name(fields["name"])
    if "description" in fields:
        task_list.description = fields["description"]

    db.commit()
    db.refresh(task_list)
    return task_list


def delete_list(db: Session, task_list: TaskList) -> int:
    """Delete a list together with every task filed under it.

    Both deletes go out in one transaction. Returns the number of tasks removed.
    """
    list_id = task_list.id
    try:
        removed = db.query(Task).filter(Task.list_id == list_id).delete(synchronize_session=False)
        db.delete(task_list)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Failed to delete task list {list_id}")
        raise StorageError() from exc

    logger.info(f"Deleted task list {list_id} and {removed} task(s)")
    return removed
