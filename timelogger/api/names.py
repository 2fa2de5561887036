#timelogger/api/names.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from timelogger.schemas.names import TaskFormNames, TimeFormTask
from timelogger.crud.names import get_task_form_names, get_time_record_form_names
from timelogger.dependencies import get_db

router = APIRouter(prefix="/api/names", tags=["Names"])

@router.get("/tasks", response_model=TaskFormNames)
def task_form_names(db: Session = Depends(get_db)):
    """
    Projects and top-level tasks for the task form.
    """
    return get_task_form_names(db)

@router.get("/time", response_model=List[TimeFormTask])
def time_record_form_names(db: Session = Depends(get_db)):
    """
    Tasks with their project's status for the time record form.
    """
    return get_time_record_form_names(db)
