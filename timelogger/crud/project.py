# timelogger/crud/project.py
from sqlalchemy.orm import Session, selectinload
import logging
from typing import Optional, List, Dict, Any

from timelogger.core.abort import AbortSignal
from timelogger.core.exceptions import ProjectNotFound, ProjectValidationError
from timelogger.crud.base import save, delete
from timelogger.crud.validators import validate_project
from timelogger.models.project import Project
from timelogger.models.task import Task
from timelogger.services.aggregation import time_by_date

logger = logging.getLogger("Timelogger.Projects")

UPDATABLE_FIELDS = ("name", "description", "deadline", "is_completed")

def project_graph_options():
    """Load options that hydrate tasks, subtasks and all their time records."""
    return (
        selectinload(Project.tasks).selectinload(Task.time_records),
        selectinload(Project.tasks).selectinload(Task.subtasks).selectinload(Task.time_records),
    )

def create_project(db: Session, data: dict, signal: Optional[AbortSignal] = None) -> Project:
    """
    Create a project after validating name, deadline and completion status.
    """
    errors = validate_project(data)
    if errors:
        logger.warning(f"Rejected project: {[e.name for e in errors]}")
        raise ProjectValidationError(errors)

    project = Project(
        name=data["name"].strip(),
        description=data.get("description"),
        deadline=data["deadline"],
        is_completed=data["is_completed"],
    )
    save(db, project, signal=signal)
    logger.info(f"Created project '{project.name}' (ID: {project.project_id})")
    return project

def get_project(db: Session, project_id: int, hydrate: bool = False) -> Project:
    """
    Return a project by ID. With ``hydrate`` the full task graph is (re)loaded.
    """
    query = db.query(Project).filter(Project.project_id == project_id)
    if hydrate:
        query = query.options(*project_graph_options()).populate_existing()
    project = query.first()
    if not project:
        raise ProjectNotFound(project_id)
    return project

def update_project(db: Session, project_id: int, data: dict, signal: Optional[AbortSignal] = None) -> Project:
    """
    Apply the supplied fields to a project. Fields not in ``data`` keep their values.
    """
    project = get_project(db, project_id)
    changes = {k: v for k, v in data.items() if k in UPDATABLE_FIELDS}

    candidate = {field: getattr(project, field) for field in UPDATABLE_FIELDS}
    candidate.update(changes)
    errors = validate_project(candidate)
    if errors:
        logger.warning(f"Rejected update of project {project_id}: {[e.name for e in errors]}")
        raise ProjectValidationError(errors)

    if "name" in changes:
        changes["name"] = changes["name"].strip()

    save(db, project, changes, signal=signal)
    if changes:
        logger.info(f"Updated project {project.project_id} fields: {changes}")
    else:
        logger.info(f"Update called but no changes for project {project.project_id}")
    return project

def delete_project(db: Session, project_id: int) -> None:
    """
    Delete a project with all its tasks, subtasks and time records.
    """
    project = get_project(db, project_id, hydrate=True)
    task_count = len(project.tasks)
    delete(db, project)
    logger.info(f"Deleted project {project_id} and {task_count} task(s)")

def _subtask_item(subtask: Task, parent: Task) -> Dict[str, Any]:
    return {
        "task_id": subtask.task_id,
        "name": subtask.name,
        "is_completed": subtask.is_completed,
        "is_parent_task": subtask.is_parent_task,
        "parent_task_id": parent.task_id,
        "is_subtask": True,
        "tracked_millis": subtask.own_tracked_millis,
    }

def _task_item(task: Task, open_only: bool = False) -> Dict[str, Any]:
    subtasks = task.subtasks
    if open_only:
        subtasks = [st for st in subtasks if st.is_completed is False]
    return {
        "task_id": task.task_id,
        "name": task.name,
        "is_completed": task.is_completed,
        "tracked_millis": task.own_tracked_millis,
        "is_parent_task": task.is_parent_task,
        "subtasks": [_subtask_item(st, task) for st in subtasks],
    }

def get_all_projects(db: Session) -> List[Dict[str, Any]]:
    """
    Every project with its tracked time; open projects first, then by deadline.
    """
    projects = (
        db.query(Project)
        .options(*project_graph_options())
        .populate_existing()
        .order_by(Project.is_completed.asc(), Project.deadline.asc())
        .all()
    )
    return [
        {
            "project_id": p.project_id,
            "name": p.name,
            "deadline": p.deadline,
            "tracked_millis": p.tracked_millis,
            "is_completed": p.is_completed,
        }
        for p in projects
    ]

def get_project_detail(db: Session, project_id: int) -> Dict[str, Any]:
    """
    Project detail: top-level tasks with their subtasks, and tracked time per day.
    """
    project = get_project(db, project_id, hydrate=True)
    return {
        "project_id": project.project_id,
        "name": project.name,
        "description": project.description,
        "deadline": project.deadline,
        "tracked_millis": project.tracked_millis,
        "is_completed": project.is_completed,
        "tasks": [_task_item(t) for t in project.tasks if not t.is_subtask],
        "time_records_by_date": time_by_date(project),
    }

def get_home_view(db: Session) -> List[Dict[str, Any]]:
    """
    Active projects ordered by deadline, each with its open tasks and open subtasks.
    """
    projects = (
        db.query(Project)
        .options(*project_graph_options())
        .populate_existing()
        .filter(Project.is_completed.is_(False))
        .order_by(Project.deadline.asc())
        .all()
    )
    return [
        {
            "project_id": p.project_id,
            "name": p.name,
            "deadline": p.deadline,
            "tracked_millis": p.tracked_millis,
            "is_completed": p.is_completed,
            "tasks": [
                _task_item(t, open_only=True)
                for t in p.tasks
                if not t.is_subtask and t.is_completed is False
            ],
        }
        for p in projects
    ]
