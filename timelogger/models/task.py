#timelogger/models/task.py
from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, Text
from sqlalchemy.orm import relationship

from timelogger.models.base import Base
from timelogger.services.aggregation import own_tracked_millis, task_tracked_millis

class Task(Base):
    """
    Task — unit of work inside a project. A task with ``parent_task_id`` is a
    subtask; subtasks never have subtasks of their own (enforced on write).
    """
    __tablename__ = "tasks"

    task_id: int = Column(Integer, primary_key=True, autoincrement=True)
    name: str = Column(String(160), nullable=False, doc="Task name")
    description: str = Column(Text, nullable=True, doc="Description")
    is_completed: bool = Column(Boolean, nullable=True, default=False, doc="Completion status")
    project_id: int = Column(Integer, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False, index=True, doc="Project ID")
    parent_task_id: int = Column(Integer, ForeignKey("tasks.task_id", ondelete="CASCADE"), nullable=True, index=True, doc="Parent task ID")

    project = relationship("Project", back_populates="tasks")

    # Subtasks (self-referencing, one level deep)
    parent_task = relationship("Task", back_populates="subtasks", remote_side=[task_id])
    subtasks = relationship(
        "Task",
        back_populates="parent_task",
        cascade="all, delete",
        order_by="Task.task_id",
    )

    time_records = relationship(
        "TimeRecord",
        back_populates="task",
        cascade="all, delete",
        order_by="TimeRecord.start_time",
    )

    @property
    def is_subtask(self) -> bool:
        return self.parent_task_id is not None

    @property
    def is_parent_task(self) -> bool:
        return len(self.subtasks) > 0

    @property
    def own_tracked_millis(self) -> int:
        return own_tracked_millis(self)

    @property
    def tracked_millis(self) -> int:
        return task_tracked_millis(self)

    def __repr__(self):
        return (
            f"<Task(task_id={self.task_id}, name='{self.name}', "
            f"project_id={self.project_id}, parent_task_id={self.parent_task_id}, "
            f"is_completed={self.is_completed})>"
        )
