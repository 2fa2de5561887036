#timelogger/models/time_record.py
from datetime import datetime, timedelta
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from timelogger.models.base import Base
from timelogger.services.aggregation import record_duration, record_tracked_millis

class TimeRecord(Base):
    """
    TimeRecord — a span of time logged against a task (naive UTC timestamps).
    """
    __tablename__ = "time_records"

    time_record_id: int = Column(Integer, primary_key=True, autoincrement=True)
    start_time: datetime = Column(DateTime, nullable=False)
    end_time: datetime = Column(DateTime, nullable=False)
    note: str = Column(String(2000), nullable=True)
    task_id: int = Column(Integer, ForeignKey("tasks.task_id", ondelete="CASCADE"), nullable=False, index=True)

    task = relationship("Task", back_populates="time_records")

    __table_args__ = (
        Index("ix_time_records_start_time", "start_time"),
    )

    @property
    def duration(self) -> timedelta:
        return record_duration(self)

    @property
    def tracked_millis(self) -> int:
        return record_tracked_millis(self)

    def __repr__(self):
        return (
            f"<TimeRecord(time_record_id={self.time_record_id}, task_id={self.task_id}, "
            f"start_time={self.start_time}, end_time={self.end_time})>"
        )
