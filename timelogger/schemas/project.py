#timelogger/schemas/project.py
from pydantic import Field
from typing import Optional, List
from datetime import date

from timelogger.schemas.base import CamelModel

class ProjectCreate(CamelModel):
    """
    ProjectCreate — payload for creating a project.
    Required fields are checked by the project validator so that every
    missing field is reported at once.
    """
    name: Optional[str] = Field(None, examples=["Website relaunch"])
    description: Optional[str] = Field(None, examples=["New landing pages"])
    deadline: Optional[date] = Field(None, examples=["2024-12-31"])
    is_completed: Optional[bool] = Field(False, description="Completed projects accept no new tasks or time")

class ProjectUpdate(CamelModel):
    """
    ProjectUpdate — any subset of writable fields; unsupplied fields keep their values.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[date] = None
    is_completed: Optional[bool] = None

class ProjectRead(CamelModel):
    """
    ProjectRead — the stored project (create response).
    """
    project_id: int
    name: str
    description: Optional[str] = None
    deadline: date
    is_completed: bool
    tracked_millis: int = 0

class ProjectListItem(CamelModel):
    project_id: int
    name: str
    deadline: date
    tracked_millis: int
    is_completed: bool

class ProjectSubtaskItem(CamelModel):
    task_id: int
    name: str
    is_completed: Optional[bool] = None
    is_parent_task: bool
    parent_task_id: int
    is_subtask: bool = True
    tracked_millis: int

class ProjectTaskItem(CamelModel):
    """
    Top-level task inside a project view. ``tracked_millis`` is the task's
    own time; subtask time is listed on the subtasks.
    """
    task_id: int
    name: str
    is_completed: Optional[bool] = None
    tracked_millis: int
    is_parent_task: bool
    subtasks: List[ProjectSubtaskItem] = Field(default_factory=list)

class DateTotal(CamelModel):
    date: date
    time: int

class ProjectDetail(CamelModel):
    project_id: int
    name: str
    description: Optional[str] = None
    deadline: date
    tracked_millis: int
    is_completed: bool
    tasks: List[ProjectTaskItem] = Field(default_factory=list)
    time_records_by_date: List[DateTotal] = Field(default_factory=list)

class HomeProject(CamelModel):
    """
    HomeProject — an active project with its open tasks (home view).
    """
    project_id: int
    name: str
    deadline: date
    tracked_millis: int
    is_completed: bool
    tasks: List[ProjectTaskItem] = Field(default_factory=list)
