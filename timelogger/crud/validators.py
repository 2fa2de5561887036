# timelogger/crud/validators.py
"""
Acceptance rules for project, task and time record payloads.

Every applicable rule is evaluated and every failure is returned, in rule
order, so a form can show all problems at once. When a referenced row is
missing, only the "does not exist" error is reported for it; rules that
need that row are skipped.
"""
from datetime import timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from timelogger.crud.base import find_project, find_task, has_subtasks
from timelogger.models.task import Task
from timelogger.schemas.response import ErrorItem

MIN_TIME_RECORD_DURATION = timedelta(minutes=30)

def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()

def validate_project(data: Dict[str, Any]) -> List[ErrorItem]:
    errors = []
    if _is_blank(data.get("name")):
        errors.append(ErrorItem(name="Name", error="Projects must have a name."))
    if data.get("deadline") is None:
        errors.append(ErrorItem(name="Deadline", error="Projects must have a deadline."))
    if data.get("is_completed") is None:
        errors.append(ErrorItem(name="IsCompleted", error="Projects must have a completion status."))
    return errors

def validate_task(db: Session, data: Dict[str, Any], task: Optional[Task] = None) -> List[ErrorItem]:
    """
    ``task`` is the stored row when validating an update, ``None`` on create.
    """
    errors = []
    task_id = task.task_id if task is not None else None

    if _is_blank(data.get("name")):
        errors.append(ErrorItem(name="Name", error="Tasks must have a name."))
    # A missing key means "not completed"; an explicit null is rejected
    if "is_completed" in data and data["is_completed"] is None:
        errors.append(ErrorItem(name="IsCompleted", error="Tasks must have a completion status."))

    project_id = data.get("project_id")
    if not project_id:
        errors.append(ErrorItem(name="ProjectId", error="Tasks must be assigned to a project."))
    else:
        project = find_project(db, project_id)
        if project is None:
            errors.append(ErrorItem(name="ProjectId", error=f"Project with ID {project_id} does not exist."))
        elif project.is_completed:
            errors.append(ErrorItem(name="ProjectId", error="Tasks cannot be added to completed projects."))

    parent_task_id = data.get("parent_task_id")
    parent = None
    if parent_task_id is not None:
        if task_id is not None and parent_task_id == task_id:
            errors.append(ErrorItem(name="ParentTaskId", error="Task cannot be its own parent."))
        else:
            parent = find_task(db, parent_task_id)
            if parent is None:
                errors.append(ErrorItem(name="ParentTaskId", error=f"Task with ID {parent_task_id} does not exist."))
            else:
                if parent.is_subtask:
                    errors.append(ErrorItem(name="ParentTaskId", error="Nested subtasks are not supported."))
                if has_subtasks(db, task_id):
                    errors.append(ErrorItem(name="ParentTaskId", error="Tasks with subtasks cannot become subtasks."))

    if parent is not None and project_id and parent.project_id != project_id:
        errors.append(ErrorItem(
            name="ProjectId",
            error="Subtasks cannot be assigned to other project than its parent's project.",
        ))

    if task is not None and project_id and project_id != task.project_id and has_subtasks(db, task_id):
        errors.append(ErrorItem(name="ProjectId", error="Tasks with subtasks cannot be moved to another project."))

    return errors

def validate_time_record(db: Session, data: Dict[str, Any]) -> List[ErrorItem]:
    errors = []
    start_time = data.get("start_time")
    end_time = data.get("end_time")

    if start_time is None:
        errors.append(ErrorItem(name="StartTime", error="Start time is required."))
    if end_time is None:
        errors.append(ErrorItem(name="EndTime", error="End time is required."))

    if start_time is not None and end_time is not None:
        if not start_time < end_time:
            errors.append(ErrorItem(name="Chronology", error="Start time must be before end time."))
        elif end_time - start_time < MIN_TIME_RECORD_DURATION:
            errors.append(ErrorItem(name="Duration", error="Time record must be at least 30 minutes long."))

    task_id = data.get("task_id")
    if not task_id:
        errors.append(ErrorItem(name="TaskId", error="Time records must be assigned to a task"))
    else:
        task = find_task(db, task_id)
        if task is None:
            errors.append(ErrorItem(name="TaskId", error=f"Task with ID {task_id} does not exist."))
        elif task.project.is_completed:
            errors.append(ErrorItem(name="TaskId", error="Time records cannot be added to completed projects."))

    return errors
