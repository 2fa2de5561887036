# timelogger/services/time_tracker.py
"""
Local time registration timer.

At most one timer runs at a time. Its state ({taskId, name, startTime}) is
kept in a small JSON file so it survives restarts; starting a second timer
while the file exists is rejected. Stopping the timer turns it into a
time record draft that still has to go through ``create_time_record``.
"""
import logging
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from timelogger.core.exceptions import TimerAlreadyRunning, TimerNotRunning
from timelogger.core.settings import settings
from timelogger.schemas.time_record import TimeRecordCreate
from timelogger.schemas.timer import TimerState

logger = logging.getLogger("Timelogger.TimeTracker")

def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

class TimeTracker:
    def __init__(self, state_file: Optional[str] = None, clock: Optional[Callable[[], datetime]] = None):
        self.state_file = Path(os.path.expanduser(state_file or settings.TIMER_STATE_FILE))
        self.clock = clock or utc_now

    def start(self, task_id: int, name: str) -> TimerState:
        """
        Start timing ``task_id``. Raises ``TimerAlreadyRunning`` if a timer exists.
        """
        state = TimerState(task_id=task_id, name=name, start_time=self.clock())
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        try:
            # "x" fails if the file exists, so two concurrent starts cannot both win.
            with open(self.state_file, "x", encoding="utf-8") as f:
                f.write(state.model_dump_json(by_alias=True))
        except FileExistsError:
            logger.warning(f"Timer start for task {task_id} rejected: a timer is already running")
            raise TimerAlreadyRunning()
        logger.info(f"Timer started for task {task_id} ('{name}') at {state.start_time.isoformat()}")
        return state

    def get_state(self) -> Optional[TimerState]:
        try:
            raw = self.state_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            return TimerState.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Unreadable timer state in {self.state_file}: {e}")
            raise

    def is_tracking(self) -> bool:
        return self.state_file.exists()

    def get_start_time(self) -> Optional[datetime]:
        state = self.get_state()
        return state.start_time if state else None

    def elapsed(self) -> timedelta:
        """Time since the timer was started; zero when no timer runs."""
        start_time = self.get_start_time()
        if start_time is None:
            return timedelta(0)
        return self.clock() - start_time

    def draft(self) -> TimeRecordCreate:
        """
        Time record draft for the running timer; the timer keeps running.
        """
        state = self.get_state()
        if state is None:
            raise TimerNotRunning()
        return TimeRecordCreate(start_time=state.start_time, end_time=self.clock(), task_id=state.task_id)

    def clear(self) -> None:
        """Discard the running timer. Raises ``TimerNotRunning`` if there is none."""
        try:
            self.state_file.unlink()
        except FileNotFoundError:
            raise TimerNotRunning()

    def stop(self) -> TimeRecordCreate:
        """
        Stop the running timer and return the time record draft for it.
        """
        draft = self.draft()
        self.clear()
        logger.info(f"Timer stopped for task {draft.task_id} after {draft.end_time - draft.start_time}")
        return draft
