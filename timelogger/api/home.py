#timelogger/api/home.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from timelogger.schemas.project import HomeProject
from timelogger.crud.project import get_home_view
from timelogger.dependencies import get_db

router = APIRouter(prefix="/api/home", tags=["Home"])

@router.get("", response_model=List[HomeProject])
def home(db: Session = Depends(get_db)):
    """
    Active projects by deadline with their open tasks.
    """
    return get_home_view(db)
