from .project import Project
from .task import Task
from .time_record import TimeRecord
