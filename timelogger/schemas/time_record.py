#timelogger/schemas/time_record.py
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from timelogger.schemas.base import CamelModel, to_naive_utc

class TimeRecordCreate(CamelModel):
    """
    TimeRecordCreate — payload for logging time against a task.
    Offset-aware timestamps are converted to naive UTC.
    """
    start_time: Optional[datetime] = Field(None, examples=["2024-05-02T09:00:00"])
    end_time: Optional[datetime] = Field(None, examples=["2024-05-02T10:30:00"])
    note: Optional[str] = Field(None, examples=["Code review"])
    task_id: Optional[int] = Field(None, examples=[1])

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timestamps(cls, v):
        return to_naive_utc(v)

class TimeRecordUpdate(CamelModel):
    """
    TimeRecordUpdate — any subset of writable fields; unsupplied fields keep their values.
    """
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    note: Optional[str] = None
    task_id: Optional[int] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timestamps(cls, v):
        return to_naive_utc(v)

class TimeRecordRead(CamelModel):
    time_record_id: int
    start_time: datetime
    end_time: datetime
    note: Optional[str] = None
    task_id: int
    tracked_millis: int

class TimeRecordProjectRef(CamelModel):
    project_id: int
    name: str

class TimeRecordTaskRef(CamelModel):
    task_id: int
    name: str
    project: TimeRecordProjectRef

class TimeRecordListItem(CamelModel):
    """
    TimeRecordListItem — a time record with its task and project (time page).
    ``duration`` is in milliseconds.
    """
    time_record_id: int
    start_time: datetime
    end_time: datetime
    duration: int
    task: TimeRecordTaskRef

class TimeRecordDetail(TimeRecordListItem):
    note: Optional[str] = None
