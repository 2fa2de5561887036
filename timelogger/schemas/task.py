#timelogger/schemas/task.py
from pydantic import Field
from typing import Optional, List
from datetime import date, datetime

from timelogger.schemas.base import CamelModel

class TaskCreate(CamelModel):
    """
    TaskCreate — payload for creating a task or, with ``parent_task_id``, a subtask.
    """
    name: Optional[str] = Field(None, examples=["Write release notes"])
    description: Optional[str] = Field(None, examples=["Summarize changes since 1.2"])
    is_completed: Optional[bool] = Field(False)
    project_id: Optional[int] = Field(None, examples=[1])
    parent_task_id: Optional[int] = Field(None, examples=[2], description="Parent task ID (subtasks only)")

class TaskUpdate(CamelModel):
    """
    TaskUpdate — any subset of writable fields; unsupplied fields keep their values.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    is_completed: Optional[bool] = None
    project_id: Optional[int] = None
    parent_task_id: Optional[int] = None

class TaskRead(CamelModel):
    """
    TaskRead — the stored task (create response).
    """
    task_id: int
    name: str
    description: Optional[str] = None
    is_completed: Optional[bool] = None
    project_id: int
    parent_task_id: Optional[int] = None
    is_subtask: bool
    is_parent_task: bool
    own_tracked_millis: int
    tracked_millis: int

class TaskListSubtask(CamelModel):
    task_id: int
    name: str
    is_completed: Optional[bool] = None
    is_parent_task: bool
    own_tracked_millis: int

class TaskListTask(TaskListSubtask):
    subtasks: List[TaskListSubtask] = Field(default_factory=list)

class ProjectWithTasks(CamelModel):
    """
    ProjectWithTasks — a project and its task tree (tasks page).
    """
    project_id: int
    name: str
    deadline: date
    tasks: List[TaskListTask] = Field(default_factory=list)

class TaskRef(CamelModel):
    task_id: int
    name: str

class TaskProjectRef(CamelModel):
    project_id: int
    name: str
    deadline: date

class TaskDetailSubtask(CamelModel):
    task_id: int
    name: str
    is_completed: Optional[bool] = None
    tracked_millis: int

class TaskDetailTimeRecord(CamelModel):
    time_record_id: int
    task_id: int
    start_time: datetime
    end_time: datetime
    tracked_millis: int
    note: Optional[str] = None

class TaskDetail(CamelModel):
    task_id: int
    name: str
    description: Optional[str] = None
    is_completed: Optional[bool] = None
    tracked_millis: int
    is_parent_task: bool
    is_subtask: bool
    parent_task: Optional[TaskRef] = None
    project: TaskProjectRef
    subtasks: List[TaskDetailSubtask] = Field(default_factory=list)
    time_records: List[TaskDetailTimeRecord] = Field(default_factory=list)
