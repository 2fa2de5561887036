#timelogger/api/task.py
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from typing import List
from timelogger.schemas.task import TaskCreate, TaskRead, TaskUpdate, TaskDetail, ProjectWithTasks
from timelogger.crud.task import (
    create_task,
    get_projects_with_tasks,
    get_task_detail,
    update_task,
    delete_task,
)
from timelogger.core.abort import AbortSignal
from timelogger.dependencies import get_db, get_abort_signal

import logging

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])
logger = logging.getLogger("Timelogger.TasksAPI")

@router.get("/all", response_model=List[ProjectWithTasks])
def list_tasks(db: Session = Depends(get_db)):
    """
    Tasks grouped by project, projects ordered by deadline.
    """
    return get_projects_with_tasks(db)

@router.get("", response_model=TaskDetail)
def get_one_task(
    task_id: int = Query(..., alias="taskId"),
    db: Session = Depends(get_db),
):
    return get_task_detail(db, task_id)

@router.post("/create", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_new_task(
    data: TaskCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    signal: AbortSignal = Depends(get_abort_signal),
):
    """
    Create a task; pass ``parentTaskId`` to create a subtask.
    """
    task = create_task(db, data.model_dump(), signal=signal)
    response.headers["Location"] = str(
        request.url_for("get_one_task").include_query_params(taskId=task.task_id)
    )
    return task

@router.put("/update", status_code=status.HTTP_204_NO_CONTENT)
def update_one_task(
    data: TaskUpdate,
    task_id: int = Query(..., alias="taskId"),
    db: Session = Depends(get_db),
    signal: AbortSignal = Depends(get_abort_signal),
):
    update_task(db, task_id, data.model_dump(exclude_unset=True), signal=signal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
def delete_one_task(
    task_id: int = Query(..., alias="taskId"),
    db: Session = Depends(get_db),
):
    delete_task(db, task_id)
    logger.info(f"Task {task_id} deleted via API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
