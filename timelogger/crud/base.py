# timelogger/crud/base.py
"""
Persistence contract shared by the validators and the per-entity CRUD modules.
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from timelogger.core.abort import AbortSignal
from timelogger.core.exceptions import OperationAborted, PersistenceError
from timelogger.models.project import Project
from timelogger.models.task import Task
from timelogger.models.time_record import TimeRecord

logger = logging.getLogger("Timelogger.Persistence")

def find_project(db: Session, project_id: Optional[int]) -> Optional[Project]:
    if project_id is None:
        return None
    return db.get(Project, project_id)

def find_task(db: Session, task_id: Optional[int]) -> Optional[Task]:
    if task_id is None:
        return None
    return db.get(Task, task_id)

def find_time_record(db: Session, time_record_id: Optional[int]) -> Optional[TimeRecord]:
    if time_record_id is None:
        return None
    return db.get(TimeRecord, time_record_id)

def project_exists(db: Session, project_id: Optional[int]) -> bool:
    if project_id is None:
        return False
    return db.query(Project.project_id).filter(Project.project_id == project_id).first() is not None

def task_exists(db: Session, task_id: Optional[int]) -> bool:
    if task_id is None:
        return False
    return db.query(Task.task_id).filter(Task.task_id == task_id).first() is not None

def has_subtasks(db: Session, task_id: Optional[int]) -> bool:
    if task_id is None:
        return False
    return db.query(Task.task_id).filter(Task.parent_task_id == task_id).first() is not None

def save(db: Session, entity: Any, changes: Optional[Dict[str, Any]] = None, signal: Optional[AbortSignal] = None) -> Any:
    """
    Apply ``changes`` to ``entity`` (if any) and commit it.

    The abort signal is checked before anything touches the session, so an
    aborted save leaves the store as it was.
    """
    if signal is not None and signal.aborted:
        logger.warning(f"Aborted before commit: {entity!r}")
        raise OperationAborted()

    for field, value in (changes or {}).items():
        setattr(entity, field, value)

    db.add(entity)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Exception during save: {e}")
        raise PersistenceError("Database error while saving changes.")
    db.refresh(entity)
    return entity

def delete(db: Session, entity: Any) -> None:
    """Delete ``entity``; owned rows go with it through the ORM cascades."""
    db.delete(entity)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Exception during delete: {e}")
        raise PersistenceError("Database error while deleting.")
