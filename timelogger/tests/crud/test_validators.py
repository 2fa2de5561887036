import pytest
from datetime import date, datetime, timedelta
from sqlalchemy.orm import Session

from timelogger.crud.validators import validate_project, validate_task, validate_time_record
from timelogger.models.project import Project
from timelogger.models.task import Task


def as_pairs(errors):
    return [(e.name, e.error) for e in errors]

# --- Projects ---

def test_valid_project_has_no_errors():
    assert validate_project({"name": "P", "deadline": date(2030, 1, 1), "is_completed": False}) == []

def test_project_reports_every_missing_field():
    errors = validate_project({"name": "  ", "deadline": None, "is_completed": None})
    assert as_pairs(errors) == [
        ("Name", "Projects must have a name."),
        ("Deadline", "Projects must have a deadline."),
        ("IsCompleted", "Projects must have a completion status."),
    ]

# --- Tasks ---

def test_empty_task_reports_exactly_name_and_project(db: Session):
    assert as_pairs(validate_task(db, {})) == [
        ("Name", "Tasks must have a name."),
        ("ProjectId", "Tasks must be assigned to a project."),
    ]

def test_task_null_completion_status(db: Session, open_project: Project):
    data = {"name": "T", "project_id": open_project.project_id, "is_completed": None}
    assert as_pairs(validate_task(db, data)) == [("IsCompleted", "Tasks must have a completion status.")]

def test_task_project_id_zero_counts_as_missing(db: Session):
    errors = validate_task(db, {"name": "T", "project_id": 0})
    assert as_pairs(errors) == [("ProjectId", "Tasks must be assigned to a project.")]

def test_task_unknown_project(db: Session):
    errors = validate_task(db, {"name": "T", "project_id": 404})
    assert as_pairs(errors) == [("ProjectId", "Project with ID 404 does not exist.")]

def test_task_on_completed_project(db: Session, completed_project: Project):
    errors = validate_task(db, {"name": "T", "project_id": completed_project.project_id})
    assert as_pairs(errors) == [("ProjectId", "Tasks cannot be added to completed projects.")]

def test_nested_subtask_is_rejected(db: Session, task_tree: dict):
    data = {
        "name": "Too deep",
        "project_id": task_tree["project"].project_id,
        "parent_task_id": task_tree["task_b"].task_id,
    }
    assert as_pairs(validate_task(db, data)) == [("ParentTaskId", "Nested subtasks are not supported.")]

def test_unknown_parent_skips_dependent_rules(db: Session, open_project: Project):
    data = {"name": "Orphan", "project_id": open_project.project_id, "parent_task_id": 999}
    assert as_pairs(validate_task(db, data)) == [("ParentTaskId", "Task with ID 999 does not exist.")]

def test_subtask_must_share_parent_project(db: Session, task_tree: dict):
    other = Project(name="Other", deadline=date(2031, 1, 1), is_completed=False)
    db.add(other)
    db.commit()
    data = {"name": "Elsewhere", "project_id": other.project_id, "parent_task_id": task_tree["task_a"].task_id}
    assert as_pairs(validate_task(db, data)) == [
        ("ProjectId", "Subtasks cannot be assigned to other project than its parent's project."),
    ]

def test_task_cannot_be_its_own_parent(db: Session, task_tree: dict):
    task_b = task_tree["task_b"]
    data = {"name": task_b.name, "project_id": task_b.project_id, "parent_task_id": task_b.task_id}
    assert as_pairs(validate_task(db, data, task=task_b)) == [("ParentTaskId", "Task cannot be its own parent.")]

def test_parent_task_cannot_become_subtask(db: Session, task_tree: dict):
    task_a = task_tree["task_a"]
    sibling = Task(name="Sibling", project_id=task_a.project_id, is_completed=False)
    db.add(sibling)
    db.commit()
    data = {"name": task_a.name, "project_id": task_a.project_id, "parent_task_id": sibling.task_id}
    assert as_pairs(validate_task(db, data, task=task_a)) == [
        ("ParentTaskId", "Tasks with subtasks cannot become subtasks."),
    ]

def test_parent_task_cannot_move_project(db: Session, task_tree: dict):
    task_a = task_tree["task_a"]
    other = Project(name="Other", deadline=date(2031, 1, 1), is_completed=False)
    db.add(other)
    db.commit()
    data = {"name": task_a.name, "project_id": other.project_id, "parent_task_id": None}
    assert as_pairs(validate_task(db, data, task=task_a)) == [
        ("ProjectId", "Tasks with subtasks cannot be moved to another project."),
    ]

# --- Time records ---

def test_time_record_missing_everything(db: Session):
    assert as_pairs(validate_time_record(db, {})) == [
        ("StartTime", "Start time is required."),
        ("EndTime", "End time is required."),
        ("TaskId", "Time records must be assigned to a task"),
    ]

@pytest.mark.parametrize("end_offset", [timedelta(0), timedelta(minutes=-5)])
def test_time_record_chronology(db: Session, task_tree: dict, end_offset: timedelta):
    start = datetime(2024, 5, 2, 9, 0)
    data = {"start_time": start, "end_time": start + end_offset, "task_id": task_tree["task_a"].task_id}
    # Duration is not checked when the order is already wrong
    assert as_pairs(validate_time_record(db, data)) == [("Chronology", "Start time must be before end time.")]

def test_time_record_shorter_than_thirty_minutes(db: Session, task_tree: dict):
    start = datetime(2024, 5, 2, 9, 0)
    data = {"start_time": start, "end_time": start + timedelta(minutes=29), "task_id": task_tree["task_a"].task_id}
    assert as_pairs(validate_time_record(db, data)) == [("Duration", "Time record must be at least 30 minutes long.")]

def test_time_record_exactly_thirty_minutes_is_accepted(db: Session, task_tree: dict):
    start = datetime(2024, 5, 2, 9, 0)
    data = {"start_time": start, "end_time": start + timedelta(minutes=30), "task_id": task_tree["task_a"].task_id}
    assert validate_time_record(db, data) == []

def test_time_record_unknown_task(db: Session):
    start = datetime(2024, 5, 2, 9, 0)
    data = {"start_time": start, "end_time": start + timedelta(hours=1), "task_id": 77}
    assert as_pairs(validate_time_record(db, data)) == [("TaskId", "Task with ID 77 does not exist.")]

def test_time_record_on_completed_project(db: Session, completed_project: Project):
    task = Task(name="Done", project_id=completed_project.project_id, is_completed=True)
    db.add(task)
    db.commit()
    start = datetime(2024, 5, 2, 9, 0)
    data = {"start_time": start, "end_time": start + timedelta(hours=1), "task_id": task.task_id}
    assert as_pairs(validate_time_record(db, data)) == [
        ("TaskId", "Time records cannot be added to completed projects."),
    ]
