# timelogger/initial_data.py

import logging
from datetime import date, datetime
from sqlalchemy.orm import Session
from timelogger.database import SessionLocal, init_db
from timelogger.models.project import Project
from timelogger.models.task import Task
from timelogger.models.time_record import TimeRecord

logger = logging.getLogger("Timelogger.InitialData")

PROJECTS = [
    {"project_id": 1, "name": "e-conomic Interview", "deadline": date(2022, 11, 17), "is_completed": False},
    {"project_id": 2, "name": "Project 2", "deadline": date(2022, 12, 1), "is_completed": False},
    {"project_id": 3, "name": "Project 3", "deadline": date(2022, 11, 1), "is_completed": True},
]

TASKS = [
    {"task_id": 1, "name": "Work on this", "project_id": 1, "is_completed": False},
    {"task_id": 2, "name": "Work on that", "project_id": 1, "is_completed": False},
    {"task_id": 3, "name": "Work on another thing", "project_id": 3, "is_completed": True},
    {"task_id": 4, "name": "Work on that other thing", "project_id": 2, "is_completed": True},
    {"task_id": 5, "name": "Some sublevel task", "project_id": 1, "parent_task_id": 2, "is_completed": False},
]

TIME_RECORDS = [
    {"time_record_id": 1, "task_id": 1, "start_time": datetime(2022, 11, 6, 11, 0), "end_time": datetime(2022, 11, 6, 12, 20)},
    {"time_record_id": 2, "task_id": 1, "start_time": datetime(2022, 11, 7, 13, 4), "end_time": datetime(2022, 11, 7, 19, 10)},
    {"time_record_id": 3, "task_id": 3, "start_time": datetime(2022, 10, 11, 8, 0), "end_time": datetime(2022, 10, 11, 16, 40)},
    {"time_record_id": 4, "task_id": 3, "start_time": datetime(2022, 10, 12, 8, 5), "end_time": datetime(2022, 10, 12, 16, 25)},
    {"time_record_id": 5, "task_id": 4, "start_time": datetime(2022, 10, 13, 8, 0), "end_time": datetime(2022, 10, 13, 16, 40)},
    {"time_record_id": 6, "task_id": 5, "start_time": datetime(2022, 10, 14, 8, 0), "end_time": datetime(2022, 10, 14, 8, 30)},
]

def seed_database(db: Session) -> bool:
    """
    Insert the demo projects, tasks and time records into an empty store.
    Returns False (and changes nothing) when projects already exist.
    """
    if db.query(Project.project_id).first() is not None:
        logger.info("Projects already present. Skipping demo data.")
        return False

    db.add_all(Project(**p) for p in PROJECTS)
    db.flush()
    db.add_all(Task(**t) for t in TASKS)
    db.flush()
    db.add_all(TimeRecord(**r) for r in TIME_RECORDS)
    db.commit()
    logger.info(f"Seeded {len(PROJECTS)} projects, {len(TASKS)} tasks and {len(TIME_RECORDS)} time records.")
    return True

def main() -> None:
    logger.info("Initializing demo data...")
    init_db()
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()
    logger.info("Finished initial data setup.")

if __name__ == "__main__":
    from dotenv import load_dotenv
    load_dotenv()

    logging.basicConfig(level=logging.INFO)
    main()
