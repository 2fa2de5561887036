#timelogger/api/timer.py
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from timelogger.schemas.time_record import TimeRecordRead
from timelogger.schemas.timer import TimerStart, TimerState, TimerStatus
from timelogger.crud.task import get_task
from timelogger.crud.time_record import create_time_record
from timelogger.services.time_tracker import TimeTracker
from timelogger.core.abort import AbortSignal
from timelogger.dependencies import get_db, get_abort_signal

import logging

router = APIRouter(prefix="/api/timer", tags=["Timer"])
logger = logging.getLogger("Timelogger.TimerAPI")

def get_time_tracker() -> TimeTracker:
    return TimeTracker()

@router.get("", response_model=TimerStatus)
def timer_status(tracker: TimeTracker = Depends(get_time_tracker)):
    state = tracker.get_state()
    if state is None:
        return TimerStatus(running=False)
    elapsed = tracker.clock() - state.start_time
    return TimerStatus(
        running=True,
        task_id=state.task_id,
        name=state.name,
        start_time=state.start_time,
        elapsed_millis=int(elapsed.total_seconds() * 1000),
    )

@router.post("/start", response_model=TimerState, status_code=status.HTTP_201_CREATED)
def start_timer(
    data: TimerStart,
    db: Session = Depends(get_db),
    tracker: TimeTracker = Depends(get_time_tracker),
):
    """
    Start timing a task. Only one timer can run at a time.
    """
    task = get_task(db, data.task_id)
    return tracker.start(task.task_id, task.name)

@router.post("/stop", response_model=TimeRecordRead, status_code=status.HTTP_201_CREATED)
def stop_timer(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    tracker: TimeTracker = Depends(get_time_tracker),
    signal: AbortSignal = Depends(get_abort_signal),
):
    """
    Stop the running timer and log its time as a new time record.

    The record goes through the usual time record rules; if it is rejected
    the timer keeps running.
    """
    draft = tracker.draft()
    record = create_time_record(db, draft.model_dump(), signal=signal)
    tracker.clear()
    logger.info(f"Timer for task {record.task_id} stopped as time record {record.time_record_id}")
    response.headers["Location"] = str(
        request.url_for("get_one_time_record").include_query_params(timeRecordId=record.time_record_id)
    )
    return record

@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def discard_timer(tracker: TimeTracker = Depends(get_time_tracker)):
    """
    Drop the running timer without logging any time.
    """
    tracker.clear()
    logger.info("Timer discarded via API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
