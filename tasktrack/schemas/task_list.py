from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional

# Schemas pour les listes

class TaskListCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None

class TaskListUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

class TaskListResponse(BaseModel):
    id: int
    user_id: int
    name: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class TaskListDeleted(BaseModel):
    message: str
