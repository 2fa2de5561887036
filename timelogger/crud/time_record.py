# timelogger/crud/time_record.py
from sqlalchemy.orm import Session, joinedload
import logging
from typing import Optional, List, Dict, Any

from timelogger.core.abort import AbortSignal
from timelogger.core.exceptions import TimeRecordNotFound, TimeRecordValidationError
from timelogger.crud.base import save, delete
from timelogger.crud.validators import validate_time_record
from timelogger.models.task import Task
from timelogger.models.time_record import TimeRecord

logger = logging.getLogger("Timelogger.TimeRecords")

UPDATABLE_FIELDS = ("start_time", "end_time", "note", "task_id")

def create_time_record(db: Session, data: dict, signal: Optional[AbortSignal] = None) -> TimeRecord:
    """
    Log time against a task. The span must be at least 30 minutes and the
    task's project must still be open.
    """
    errors = validate_time_record(db, data)
    if errors:
        logger.warning(f"Rejected time record: {[e.name for e in errors]}")
        raise TimeRecordValidationError(errors)

    record = TimeRecord(
        start_time=data["start_time"],
        end_time=data["end_time"],
        note=data.get("note"),
        task_id=data["task_id"],
    )
    save(db, record, signal=signal)
    logger.info(f"Created time record {record.time_record_id} for task {record.task_id} ({record.tracked_millis} ms)")
    return record

def get_time_record(db: Session, time_record_id: int) -> TimeRecord:
    record = (
        db.query(TimeRecord)
        .options(joinedload(TimeRecord.task).joinedload(Task.project))
        .filter(TimeRecord.time_record_id == time_record_id)
        .first()
    )
    if not record:
        raise TimeRecordNotFound(time_record_id)
    return record

def update_time_record(db: Session, time_record_id: int, data: dict, signal: Optional[AbortSignal] = None) -> TimeRecord:
    """
    Apply the supplied fields to a time record; the merged record is validated as a whole.
    """
    record = get_time_record(db, time_record_id)
    changes = {k: v for k, v in data.items() if k in UPDATABLE_FIELDS}

    candidate = {field: getattr(record, field) for field in UPDATABLE_FIELDS}
    candidate.update(changes)
    errors = validate_time_record(db, candidate)
    if errors:
        logger.warning(f"Rejected update of time record {time_record_id}: {[e.name for e in errors]}")
        raise TimeRecordValidationError(errors)

    save(db, record, changes, signal=signal)
    if changes:
        logger.info(f"Updated time record {record.time_record_id} fields: {changes}")
    else:
        logger.info(f"Update called but no changes for time record {record.time_record_id}")
    return record

def delete_time_record(db: Session, time_record_id: int) -> None:
    record = get_time_record(db, time_record_id)
    delete(db, record)
    logger.info(f"Deleted time record {time_record_id}")

def _record_item(record: TimeRecord) -> Dict[str, Any]:
    task = record.task
    return {
        "time_record_id": record.time_record_id,
        "start_time": record.start_time,
        "end_time": record.end_time,
        "duration": record.tracked_millis,
        "task": {
            "task_id": task.task_id,
            "name": task.name,
            "project": {
                "project_id": task.project.project_id,
                "name": task.project.name,
            },
        },
    }

def get_all_time_records(db: Session) -> List[Dict[str, Any]]:
    """
    Every time record with its task and project, oldest first.
    """
    records = (
        db.query(TimeRecord)
        .options(joinedload(TimeRecord.task).joinedload(Task.project))
        .order_by(TimeRecord.start_time.asc())
        .all()
    )
    return [_record_item(r) for r in records]

def get_time_record_detail(db: Session, time_record_id: int) -> Dict[str, Any]:
    record = get_time_record(db, time_record_id)
    return {**_record_item(record), "note": record.note}
