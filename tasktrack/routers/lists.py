from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from tasktrack.core.auth import get_current_user, get_owned_list
from tasktrack.core.database import get_db
from tasktrack.models.task_list import TaskList
from tasktrack.models.user import User
from tasktrack.schemas.task_list import TaskListCreate, TaskListUpdate, TaskListResponse, TaskListDeleted
from tasktrack.services import list_service

router = APIRouter(prefix="/lists", tags=["lists"])

# Crée une liste
@router.post("", response_model=TaskListResponse, status_code=status.HTTP_201_CREATED)
def create_list(list_data: TaskListCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return list_service.create_list(db, current_user.id, list_data.name, list_data.description)

@router.get("", response_model=List[TaskListResponse])
def list_lists(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return list_service.list_for_owner(db, current_user.id)

@router.get("/{list_id}", response_model=TaskListResponse)
def get_list(task_list: TaskList = Depends(get_owned_list)):
    return task_list

@router.put("/{list_id}", response_model=TaskListResponse)
def update_list(list_data: TaskListUpdate, task_list: TaskList = Depends(get_owned_list), db: Session = Depends(get_db)):
    return list_service.update_list(db, task_list, list_data)

# Supprime la liste ET ses tâches
@router.delete("/{list_id}", response_model=TaskListDeleted)
def delete_list(task_list: TaskList = Depends(get_owned_list), db: Session = Depends(get_db)):
    list_service.delete_list(db, task_list)
    return {"message": "Task list deleted successfully"}
