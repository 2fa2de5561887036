#timelogger/api/time_record.py
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session
from typing import List
from timelogger.schemas.time_record import (
    TimeRecordCreate, TimeRecordRead, TimeRecordUpdate, TimeRecordListItem, TimeRecordDetail
)
from timelogger.crud.time_record import (
    create_time_record,
    get_all_time_records,
    get_time_record_detail,
    update_time_record,
    delete_time_record,
)
from timelogger.core.abort import AbortSignal
from timelogger.dependencies import get_db, get_abort_signal

import logging

router = APIRouter(prefix="/api/time", tags=["Time records"])
logger = logging.getLogger("Timelogger.TimeRecordsAPI")

@router.get("/all", response_model=List[TimeRecordListItem])
def list_time_records(db: Session = Depends(get_db)):
    """
    All time records, oldest first.
    """
    return get_all_time_records(db)

@router.get("", response_model=TimeRecordDetail)
def get_one_time_record(
    time_record_id: int = Query(..., alias="timeRecordId"),
    db: Session = Depends(get_db),
):
    return get_time_record_detail(db, time_record_id)

@router.post("/create", response_model=TimeRecordRead, status_code=status.HTTP_201_CREATED)
def create_new_time_record(
    data: TimeRecordCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    signal: AbortSignal = Depends(get_abort_signal),
):
    record = create_time_record(db, data.model_dump(), signal=signal)
    response.headers["Location"] = str(
        request.url_for("get_one_time_record").include_query_params(timeRecordId=record.time_record_id)
    )
    return record

@router.put("/update", status_code=status.HTTP_204_NO_CONTENT)
def update_one_time_record(
    data: TimeRecordUpdate,
    time_record_id: int = Query(..., alias="timeRecordId"),
    db: Session = Depends(get_db),
    signal: AbortSignal = Depends(get_abort_signal),
):
    update_time_record(db, time_record_id, data.model_dump(exclude_unset=True), signal=signal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
def delete_one_time_record(
    time_record_id: int = Query(..., alias="timeRecordId"),
    db: Session = Depends(get_db),
):
    delete_time_record(db, time_record_id)
    logger.info(f"Time record {time_record_id} deleted via API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
