"""Pydantic schemas for task request/response validation."""

from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from task_api.core.config import settings
from task_api.models.task import TaskStatus

T = TypeVar("T")


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Ramène une date avec fuseau en UTC naïf (format stocké en base)."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Schemas tâches

class TaskCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value):
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, value):
        return to_naive_utc(value)


class TaskUpdate(TaskCreate):
    """Remplacement complet d'une tâche (PUT), id inclus."""

    id: int
    status: TaskStatus = TaskStatus.TODO


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    description: Optional[str]
    status: TaskStatus
    due_date: Optional[datetime] = Field(alias="dueDate")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class TaskSummary(BaseModel):
    """Vue résumée d'une tâche exposée en lecture."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    status: TaskStatus
    description: Optional[str] = None
    closed_date: Optional[datetime] = Field(None, alias="closedDate")
    start_date: datetime = Field(alias="startDate")
    last_change_date: datetime = Field(alias="lastChangeDate")


class TaskQueryParameters(BaseModel):
    status: Optional[TaskStatus] = None
    due_before: Optional[datetime] = None
    sort_by: Optional[str] = None
    sort_order: str = "asc"
    page_number: int = 1
    page_size: int = settings.DEFAULT_PAGE_SIZE

    @field_validator("due_before")
    @classmethod
    def _due_before_utc(cls, value):
        return to_naive_utc(value)


class PagedResult(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    total_count: int = Field(alias="totalCount")
    page_number: int = Field(alias="pageNumber")
    page_size: int = Field(alias="pageSize")
    data: List[T]
