"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime, timezone
from typing import Annotated, Optional

from tasktrack.core.database import MAX_ROW_ID

# ids outside this range can't name a row and are rejected before any query
RowId = Annotated[int, Field(ge=1, le=MAX_ROW_ID)]


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Offset-aware datetimes are stored as naive UTC; naive ones are kept as given."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class TaskCreate(BaseModel):
    """Schema for creating a task.

    Everything is optional at this level: title, priority and list_id are
    validated by the task service so that empty and null values get the
    documented defaults or error messages.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    assignee_id: Optional[RowId] = None
    status: Optional[str] = None
    list_id: Optional[RowId] = None
    due_date: Optional[datetime] = None
    priority: Optional[str] = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class TaskUpdate(BaseModel):
    """Partial update: one optional slot per mutable field, unknown keys rejected.

    Only the fields present in the request body are applied
    (``model_fields_set``), so ``{"list_id": null}`` detaches a task while an
    omitted ``list_id`` leaves it untouched.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    list_id: Optional[RowId] = None
    due_date: Optional[datetime] = None
    priority: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class TaskResponse(BaseModel):
    """Schema for task responses from API."""

    id: int
    title: str
    description: Optional[str]
    assignee_id: Optional[int]
    status: str
    priority: str
    list_id: Optional[int]
    due_date: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
