#timelogger/schemas/names.py
from pydantic import Field
from typing import List, Optional

from timelogger.schemas.base import CamelModel

class ProjectName(CamelModel):
    project_id: int
    name: str

class ProjectNameOnly(CamelModel):
    name: str

class TaskFormTask(CamelModel):
    task_id: int
    name: str
    project_id: int
    project: ProjectNameOnly

class TaskFormNames(CamelModel):
    """
    TaskFormNames — options for the task form: every project and every top-level task.
    """
    projects: List[ProjectName] = Field(default_factory=list)
    tasks: List[TaskFormTask] = Field(default_factory=list)

class ProjectNameStatus(CamelModel):
    name: str
    is_completed: bool

class TimeFormTask(CamelModel):
    """
    TimeFormTask — a task option for the time record form, with its project's status.
    """
    task_id: int
    name: str
    is_completed: Optional[bool] = None
    project: ProjectNameStatus
