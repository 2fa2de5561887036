#timelogger/api/project.py
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from typing import List
from timelogger.schemas.project import (
    ProjectCreate, ProjectRead, ProjectUpdate, ProjectListItem, ProjectDetail
)
from timelogger.crud.project import (
    create_project,
    get_all_projects,
    get_project_detail,
    update_project,
    delete_project,
)
from timelogger.core.abort import AbortSignal
from timelogger.dependencies import get_db, get_abort_signal

import logging

router = APIRouter(prefix="/api/projects", tags=["Projects"])
logger = logging.getLogger("Timelogger.ProjectsAPI")

@router.get("/all", response_model=List[ProjectListItem])
def list_projects(db: Session = Depends(get_db)):
    """
    All projects, open ones first, then by deadline.
    """
    return get_all_projects(db)

@router.get("", response_model=ProjectDetail)
def get_one_project(
    project_id: int = Query(..., alias="projectId"),
    db: Session = Depends(get_db),
):
    """
    Project with its task tree and time per day.
    """
    return get_project_detail(db, project_id)

@router.post("/create", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_new_project(
    data: ProjectCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    signal: AbortSignal = Depends(get_abort_signal),
):
    project = create_project(db, data.model_dump(), signal=signal)
    response.headers["Location"] = str(
        request.url_for("get_one_project").include_query_params(projectId=project.project_id)
    )
    return project

@router.put("/update", status_code=status.HTTP_204_NO_CONTENT)
def update_one_project(
    data: ProjectUpdate,
    project_id: int = Query(..., alias="projectId"),
    db: Session = Depends(get_db),
    signal: AbortSignal = Depends(get_abort_signal),
):
    update_project(db, project_id, data.model_dump(exclude_unset=True), signal=signal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
def delete_one_project(
    project_id: int = Query(..., alias="projectId"),
    db: Session = Depends(get_db),
):
    """
    Delete a project together with its tasks, subtasks and time records.
    """
    delete_project(db, project_id)
    logger.info(f"Project {project_id} deleted via API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
