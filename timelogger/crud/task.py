#timelogger/crud/task.py
from sqlalchemy.orm import Session, selectinload, joinedload
import logging
from typing import Optional, List, Dict, Any

from timelogger.core.abort import AbortSignal
from timelogger.core.exceptions import TaskNotFound, TaskValidationError
from timelogger.crud.base import save, delete
from timelogger.crud.project import project_graph_options
from timelogger.crud.validators import validate_task
from timelogger.models.project import Project
from timelogger.models.task import Task

logger = logging.getLogger("Timelogger.Tasks")

UPDATABLE_FIELDS = ("name", "description", "is_completed", "project_id", "parent_task_id")

def task_graph_options():
    """Load options for the task detail view."""
    return (
        joinedload(Task.project),
        joinedload(Task.parent_task),
        selectinload(Task.time_records),
        selectinload(Task.subtasks).selectinload(Task.time_records),
        selectinload(Task.subtasks).selectinload(Task.subtasks),
    )

def create_task(db: Session, data: dict, signal: Optional[AbortSignal] = None) -> Task:
    """
    Create a task, or a subtask when ``parent_task_id`` is given.
    """
    errors = validate_task(db, data)
    if errors:
        logger.warning(f"Rejected task: {[e.name for e in errors]}")
        raise TaskValidationError(errors)

    task = Task(
        name=data["name"].strip(),
        description=data.get("description"),
        is_completed=data.get("is_completed", False),
        project_id=data["project_id"],
        parent_task_id=data.get("parent_task_id"),
    )
    save(db, task, signal=signal)
    logger.info(f"Created task {task.task_id} for project {task.project_id}")
    return task

def get_task(db: Session, task_id: int, hydrate: bool = False) -> Task:
    """
    Return a task by ID. With ``hydrate`` its project, parent, subtasks and time records are (re)loaded.
    """
    query = db.query(Task).filter(Task.task_id == task_id)
    if hydrate:
        query = query.options(*task_graph_options()).populate_existing()
    task = query.first()
    if not task:
        raise TaskNotFound(task_id)
    return task

def update_task(db: Session, task_id: int, data: dict, signal: Optional[AbortSignal] = None) -> Task:
    """
    Apply the supplied fields to a task. Fields not in ``data`` keep their values;
    an explicit ``parent_task_id=None`` turns a subtask into a top-level task.
    """
    task = get_task(db, task_id)
    changes = {k: v for k, v in data.items() if k in UPDATABLE_FIELDS}

    candidate = {field: getattr(task, field) for field in UPDATABLE_FIELDS}
    candidate.update(changes)
    errors = validate_task(db, candidate, task=task)
    if errors:
        logger.warning(f"Rejected update of task {task_id}: {[e.name for e in errors]}")
        raise TaskValidationError(errors)

    if "name" in changes:
        changes["name"] = changes["name"].strip()

    save(db, task, changes, signal=signal)
    if changes:
        logger.info(f"Updated task {task.task_id} fields: {changes}")
    else:
        logger.info(f"Update called but no changes for task {task.task_id}")
    return task

def delete_task(db: Session, task_id: int) -> None:
    """
    Delete a task with its subtasks and all their time records.
    """
    task = get_task(db, task_id, hydrate=True)
    subtask_count = len(task.subtasks)
    delete(db, task)
    logger.info(f"Deleted task {task_id} and {subtask_count} subtask(s)")

def _list_task(task: Task) -> Dict[str, Any]:
    return {
        "task_id": task.task_id,
        "name": task.name,
        "is_completed": task.is_completed,
        "is_parent_task": task.is_parent_task,
        "own_tracked_millis": task.own_tracked_millis,
    }

def get_projects_with_tasks(db: Session) -> List[Dict[str, Any]]:
    """
    Every project with its top-level tasks and their subtasks, ordered by deadline.
    """
    projects = (
        db.query(Project)
        .options(*project_graph_options())
        .populate_existing()
        .order_by(Project.deadline.asc())
        .all()
    )
    return [
        {
            "project_id": p.project_id,
            "name": p.name,
            "deadline": p.deadline,
            "tasks": [
                {**_list_task(t), "subtasks": [_list_task(st) for st in t.subtasks]}
                for t in p.tasks
                if not t.is_subtask
            ],
        }
        for p in projects
    ]

def get_task_detail(db: Session, task_id: int) -> Dict[str, Any]:
    """
    Task detail: totals including subtask time, parent/project references,
    subtasks and own time records.
    """
    task = get_task(db, task_id, hydrate=True)
    parent = task.parent_task if task.is_subtask else None
    return {
        "task_id": task.task_id,
        "name": task.name,
        "description": task.description,
        "is_completed": task.is_completed,
        "tracked_millis": task.tracked_millis,
        "is_parent_task": task.is_parent_task,
        "is_subtask": task.is_subtask,
        "parent_task": {"task_id": parent.task_id, "name": parent.name} if parent else None,
        "project": {
            "project_id": task.project.project_id,
            "name": task.project.name,
            "deadline": task.project.deadline,
        },
        "subtasks": [
            {
                "task_id": st.task_id,
                "name": st.name,
                "is_completed": st.is_completed,
                "tracked_millis": st.tracked_millis,
            }
            for st in task.subtasks
        ],
        "time_records": [
            {
                "time_record_id": tr.time_record_id,
                "task_id": tr.task_id,
                "start_time": tr.start_time,
                "end_time": tr.end_time,
                "tracked_millis": tr.tracked_millis,
                "note": tr.note,
            }
            for tr in task.time_records
        ],
    }
