#timelogger/schemas/timer.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from timelogger.schemas.base import CamelModel

class TimerState(CamelModel):
    """
    TimerState — the single running timer kept on local disk.
    """
    task_id: int
    name: str
    start_time: datetime

class TimerStart(CamelModel):
    task_id: int = Field(..., examples=[1])

class TimerStatus(CamelModel):
    """
    TimerStatus — whether a timer runs and, if so, for which task and how long.
    """
    running: bool
    task_id: Optional[int] = None
    name: Optional[str] = None
    start_time: Optional[datetime] = None
    elapsed_millis: int = 0
