import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
import os
from datetime import date, datetime
from typing import Generator

# Set before settings are imported so the app never touches a real database
# and starts with an empty store.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SEED_DATABASE"] = "false"

# Registers every model on Base.metadata
import timelogger.models

from timelogger.models.base import Base
from timelogger.main import app
from timelogger.dependencies import get_db
from timelogger.initial_data import seed_database
from timelogger.models.project import Project
from timelogger.models.task import Task
from timelogger.models.time_record import TimeRecord

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """
    Fresh tables for every test function.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    TestClient whose requests use the test session.
    """
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    del app.dependency_overrides[get_db]


@pytest.fixture(scope="function")
def seeded_db(db: Session) -> Session:
    """
    The demo dataset: projects 1 and 2 open, project 3 completed; task 5 is a
    subtask of task 2.
    """
    seed_database(db)
    return db


@pytest.fixture
def open_project(db: Session) -> Project:
    project = Project(name="Open project", deadline=date(2030, 1, 31), is_completed=False)
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


@pytest.fixture
def completed_project(db: Session) -> Project:
    project = Project(name="Completed project", deadline=date(2020, 1, 31), is_completed=True)
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


@pytest.fixture
def task_tree(db: Session, open_project: Project) -> dict:
    """
    Task A with 21,960,000 ms of own time and subtask B with 1,800,000 ms.
    """
    task_a = Task(name="Task A", project_id=open_project.project_id, is_completed=False)
    db.add(task_a)
    db.commit()
    task_b = Task(name="Subtask B", project_id=open_project.project_id, parent_task_id=task_a.task_id, is_completed=False)
    db.add(task_b)
    db.commit()
    db.add_all([
        # 80 min + 286 min = 366 min
        TimeRecord(task_id=task_a.task_id, start_time=datetime(2024, 5, 6, 11, 0), end_time=datetime(2024, 5, 6, 12, 20)),
        TimeRecord(task_id=task_a.task_id, start_time=datetime(2024, 5, 7, 9, 0), end_time=datetime(2024, 5, 7, 13, 46)),
        # 30 min
        TimeRecord(task_id=task_b.task_id, start_time=datetime(2024, 5, 7, 14, 0), end_time=datetime(2024, 5, 7, 14, 30), note="Review"),
    ])
    db.commit()
    return {"project": open_project, "task_a": task_a, "task_b": task_b}
