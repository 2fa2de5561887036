#timelogger/models/project.py
from datetime import date
from sqlalchemy import Column, Integer, String, Date, Text, Boolean, Index
from sqlalchemy.orm import relationship

from timelogger.models.base import Base
from timelogger.services.aggregation import project_tracked_millis

class Project(Base):
    """
    Project — top unit of work. Owns every task (top-level tasks and subtasks);
    deleting it removes them together with their time records.
    """
    __tablename__ = "projects"

    project_id: int = Column(Integer, primary_key=True, autoincrement=True)
    name: str = Column(String(128), nullable=False, doc="Project name")
    description: str = Column(Text, nullable=True, doc="Description")
    deadline: date = Column(Date, nullable=False, doc="Date by which the project must be completed")
    is_completed: bool = Column(Boolean, nullable=False, default=False, doc="Completed projects accept no new tasks or time")

    tasks = relationship(
        "Task",
        back_populates="project",
        cascade="all, delete",
        order_by="Task.task_id",
    )

    __table_args__ = (
        Index("ix_projects_deadline", "deadline"),
    )

    @property
    def tracked_millis(self) -> int:
        return project_tracked_millis(self)

    def __repr__(self):
        return (
            f"<Project(project_id={self.project_id}, name='{self.name}', "
            f"deadline={self.deadline}, is_completed={self.is_completed})>"
        )
