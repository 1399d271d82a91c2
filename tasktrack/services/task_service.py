"""Task service"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from tasktrack.core.errors import ValidationError
from tasktrack.models.task import Task
from tasktrack.models.user import User
from tasktrack.schemas.task import TaskCreate, TaskUpdate
from tasktrack.services import list_service
from tasktrack.services.sorting import PRIORITIES, sort_tasks, validate_sort

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "todo"
DEFAULT_PRIORITY = "medium"


def normalize_priority(priority: Optional[str]) -> str:
    """Empty or null means the default; any other value must be a known priority."""
    if priority is None or priority == "":
        return DEFAULT_PRIORITY
    if priority not in PRIORITIES:
        raise ValidationError("Priority must be high, medium, or low")
    return priority


def normalize_status(status: Optional[str]) -> str:
    return status or DEFAULT_STATUS


def validate_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("title required")
    return title


def validate_list_id(db: Session, list_id: int, user_id: int) -> int:
    if list_service.get_owned_list(db, list_id, user_id) is None:
        raise ValidationError("Invalid list_id")
    return list_id


def create_task(db: Session, creator: User, data: TaskCreate) -> Task:
    title = validate_title(data.title)
    priority = normalize_priority(data.priority)

    if data.list_id is not None:
        validate_list_id(db, data.list_id, creator.id)

    assignee_id = creator.id
    if data.assignee_id is not None and data.assignee_id != creator.id:
        if db.query(User).filter(User.id == data.assignee_id).first() is None:
            raise ValidationError("Invalid assignee_id")
        assignee_id = data.assignee_id

    # a list only holds tasks its owner can see
    if data.list_id is not None and assignee_id != creator.id:
        raise ValidationError("Invalid list_id")

    task = Task(
        title=title,
        description=data.description,
        assignee_id=assignee_id,
        status=normalize_status(data.status),
        priority=priority,
        list_id=data.list_id,
        due_date=data.due_date
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def list_for_user(
    db: Session,
    user_id: int,
    list_id: Optional[int] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None
) -> List[Task]:
    """Tasks assigned to ``user_id``, optionally narrowed to one list, in composite order."""
    sort_by, sort_order = validate_sort(sort_by, sort_order)

    query = db.query(Task).filter(Task.assignee_id == user_id)
    if list_id is not None:
        query = query.filter(Task.list_id == list_id)

    return sort_tasks(query.all(), sort_by, sort_order)


def get_task(db: Session, task_id: int) -> Optional[Task]:
    return db.query(Task).filter(Task.id == task_id).first()


def update_task(db: Session, task: Task, user_id: int, changes: TaskUpdate) -> Task:
    fields = changes.model_dump(exclude_unset=True)

    if "title" in fields:
        fields["title"] = validate_title(fields["title"])
    if "priority" in fields:
        fields["priority"] = normalize_priority(fields["priority"])
    if "status" in fields:
        fields["status"] = normalize_status(fields["status"])
    if fields.get("list_id") is not None:
        validate_list_id(db, fields["list_id"], user_id)

    for field, value in fields.items():
        setattr(task, field, value)

    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, task: Task) -> None:
    task_id = task.id
    db.delete(task)
    db.commit()
    logger.info(f"Deleted task {task_id}")
