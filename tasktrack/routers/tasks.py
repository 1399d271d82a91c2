from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from tasktrack.core.auth import authorize_list, get_current_user, get_owned_task
from tasktrack.core.database import MAX_ROW_ID, get_db
from tasktrack.models.task import Task
from tasktrack.models.user import User
from tasktrack.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from tasktrack.services import task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.create_task(db, current_user, task_data)


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    list_id: Optional[int] = Query(None, ge=1, le=MAX_ROW_ID),
    sort_by: Optional[str] = Query(None),
    sort_order: Optional[str] = Query(None)
):
    if list_id is not None:
        authorize_list(db, list_id, current_user)

    return task_service.list_for_user(db, current_user.id, list_id, sort_by, sort_order)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task: Task = Depends(get_owned_task)):
    return task


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_data: TaskUpdate,
    task: Task = Depends(get_owned_task),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.update_task(db, task, current_user.id, task_data)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task: Task = Depends(get_owned_task),
    db: Session = Depends(get_db)
):
    task_service.delete_task(db, task)
