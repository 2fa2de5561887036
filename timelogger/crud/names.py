# timelogger/crud/names.py
"""
Lightweight id/name lists that feed the task and time record forms.
"""
from sqlalchemy.orm import Session, joinedload
import logging
from typing import List, Dict, Any

from timelogger.models.project import Project
from timelogger.models.task import Task

logger = logging.getLogger("Timelogger.Views")

def get_task_form_names(db: Session) -> Dict[str, Any]:
    """
    Every project, plus every top-level task as a candidate parent.
    """
    projects = db.query(Project).order_by(Project.project_id.asc()).all()
    tasks = (
        db.query(Task)
        .options(joinedload(Task.project))
        .filter(Task.parent_task_id.is_(None))
        .order_by(Task.task_id.asc())
        .all()
    )
    logger.debug(f"Task form names: {len(projects)} project(s), {len(tasks)} task(s)")
    return {
        "projects": [{"project_id": p.project_id, "name": p.name} for p in projects],
        "tasks": [
            {
                "task_id": t.task_id,
                "name": t.name,
                "project_id": t.project_id,
                "project": {"name": t.project.name},
            }
            for t in tasks
        ],
    }

def get_time_record_form_names(db: Session) -> List[Dict[str, Any]]:
    """
    Every task with its project's name and status; the form greys out
    tasks of completed projects.
    """
    tasks = (
        db.query(Task)
        .options(joinedload(Task.project))
        .order_by(Task.task_id.asc())
        .all()
    )
    return [
        {
            "task_id": t.task_id,
            "name": t.name,
            "is_completed": t.is_completed,
            "project": {"name": t.project.name, "is_completed": t.project.is_completed},
        }
        for t in tasks
    ]
