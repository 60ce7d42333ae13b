from fastapi import APIRouter, Depends, HTTPException, status, Query, Request, Response
from sqlalchemy.orm import Session
from typing import Optional
from datetime import datetime

from task_api.core.config import settings
from task_api.core.database import get_db
from task_api.models.task import TaskStatus
from task_api.schemas.task import (
    PagedResult,
    TaskCreate,
    TaskQueryParameters,
    TaskResponse,
    TaskSummary,
    TaskUpdate,
)
from task_api.services import task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])


def parse_status(value: Optional[int]) -> Optional[TaskStatus]:
    # le filtre arrive en entier, on refuse explicitement les valeurs hors enum
    if value is None:
        return None
    try:
        return TaskStatus(value)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid status: {value}")


def get_query_parameters(
    status_value: Optional[int] = Query(None, alias="status"),
    due_before: Optional[datetime] = Query(None, alias="dueBefore"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: str = Query("asc", alias="sortOrder"),
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize"),
) -> TaskQueryParameters:
    return TaskQueryParameters(
        status=parse_status(status_value),
        due_before=due_before,
        sort_by=sort_by,
        sort_order=sort_order,
        page_number=page_number,
        page_size=page_size,
    )


@router.get("", response_model=PagedResult[TaskSummary])
def list_tasks(
    params: TaskQueryParameters = Depends(get_query_parameters),
    db: Session = Depends(get_db)
):
    return task_service.list_tasks(db, params)


@router.get("/{task_id}", response_model=TaskSummary)
def get_task(task_id: int, db: Session = Depends(get_db)):
    task = task_service.get_task(db, task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")

    return task_service.to_summary(task)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    new_task = task_service.create_task(db, task_data)
    response.headers["Location"] = str(request.url_for("get_task", task_id=new_task.id))
    return new_task


@router.put("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    db: Session = Depends(get_db)
):
    if task_id != task_data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Task id mismatch")

    task = task_service.update_task(db, task_id, task_data)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    if not task_service.delete_task(db, task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
