import pytest
from datetime import datetime, timedelta
from sqlalchemy.orm import Session

from timelogger.core.abort import AbortSignal
from timelogger.core.exceptions import OperationAborted, TimeRecordNotFound, TimeRecordValidationError
from timelogger.crud.time_record import (
    create_time_record,
    get_time_record,
    update_time_record,
    delete_time_record,
    get_all_time_records,
    get_time_record_detail,
)
from timelogger.models.time_record import TimeRecord as TimeRecordModel

START = datetime(2024, 6, 3, 9, 0)


def test_create_time_record_success(db: Session, task_tree: dict):
    record = create_time_record(db, {
        "start_time": START,
        "end_time": START + timedelta(hours=2),
        "note": "Pairing",
        "task_id": task_tree["task_a"].task_id,
    })

    assert record.time_record_id is not None
    assert record.tracked_millis == 7_200_000
    assert record.duration == timedelta(hours=2)

def test_create_time_record_too_short(db: Session, task_tree: dict):
    data = {"start_time": START, "end_time": START + timedelta(minutes=29), "task_id": task_tree["task_a"].task_id}
    with pytest.raises(TimeRecordValidationError) as exc_info:
        create_time_record(db, data)
    assert [(e.name, e.error) for e in exc_info.value.errors] == [
        ("Duration", "Time record must be at least 30 minutes long."),
    ]
    assert db.query(TimeRecordModel).count() == 3

def test_create_time_record_on_completed_project(seeded_db: Session):
    # Task 3 belongs to completed project 3
    data = {"start_time": START, "end_time": START + timedelta(hours=1), "task_id": 3}
    with pytest.raises(TimeRecordValidationError, match="Time records cannot be added to completed projects."):
        create_time_record(seeded_db, data)

def test_create_time_record_aborted(db: Session, task_tree: dict):
    signal = AbortSignal()
    signal.abort()
    data = {"start_time": START, "end_time": START + timedelta(hours=1), "task_id": task_tree["task_a"].task_id}
    with pytest.raises(OperationAborted):
        create_time_record(db, data, signal=signal)
    assert db.query(TimeRecordModel).count() == 3

def test_get_time_record_not_found(db: Session):
    with pytest.raises(TimeRecordNotFound, match="Time record with ID 31 does not exist."):
        get_time_record(db, 31)

def test_update_time_record_validates_merged_record(seeded_db: Session):
    # Record 6 runs 08:00-08:30; moving only the end earlier breaks the minimum
    with pytest.raises(TimeRecordValidationError, match="Duration"):
        update_time_record(seeded_db, 6, {"end_time": datetime(2022, 10, 14, 8, 20)})

def test_update_time_record_chronology(seeded_db: Session):
    with pytest.raises(TimeRecordValidationError) as exc_info:
        update_time_record(seeded_db, 1, {"end_time": datetime(2022, 11, 6, 10, 0)})
    assert [e.name for e in exc_info.value.errors] == ["Chronology"]

def test_update_time_record_success(seeded_db: Session):
    updated = update_time_record(seeded_db, 1, {"end_time": datetime(2022, 11, 6, 13, 0), "note": "Extended"})
    assert updated.tracked_millis == 7_200_000
    assert updated.note == "Extended"
    assert updated.start_time == datetime(2022, 11, 6, 11, 0)

def test_delete_time_record(seeded_db: Session):
    delete_time_record(seeded_db, 2)
    with pytest.raises(TimeRecordNotFound):
        get_time_record(seeded_db, 2)
    assert seeded_db.query(TimeRecordModel).count() == 5

def test_all_time_records_oldest_first(seeded_db: Session):
    records = get_all_time_records(seeded_db)

    assert [r["time_record_id"] for r in records] == [3, 4, 5, 6, 1, 2]
    assert records[0]["duration"] == (8 * 60 + 40) * 60_000
    assert records[0]["task"] == {
        "task_id": 3,
        "name": "Work on another thing",
        "project": {"project_id": 3, "name": "Project 3"},
    }

def test_time_record_detail_includes_note(db: Session, task_tree: dict):
    record = db.query(TimeRecordModel).filter(TimeRecordModel.task_id == task_tree["task_b"].task_id).one()
    detail = get_time_record_detail(db, record.time_record_id)
    assert detail["note"] == "Review"
    assert detail["duration"] == 1_800_000
    assert detail["task"]["name"] == "Subtask B"
