# timelogger/core/exceptions.py

from typing import List, Optional

from timelogger.schemas.response import ErrorItem, ErrorResponse

class BaseAppException(Exception):
    """Base class for all application exceptions.

    Every subclass maps to one entry of the error payload returned to the
    client: ``{code, cause, errors: [{name, error}]}``.
    """
    code: str = "APP-500"
    cause: str = "Application error"
    status_code: int = 500

    def __init__(self, message: str = "App exception", errors: Optional[List[ErrorItem]] = None):
        super().__init__(message)
        self.errors: List[ErrorItem] = list(errors or [])

    def to_payload(self) -> dict:
        return ErrorResponse(code=self.code, cause=self.cause, errors=self.errors).model_dump()

# ==== Validation ====

class ValidationFailed(BaseAppException):
    """One or more fields failed validation."""
    code = "VAL-400"
    cause = "Validation failed"
    status_code = 400

    def __init__(self, errors: List[ErrorItem], message: str = "Validation error"):
        super().__init__(message, errors)

    def __str__(self) -> str:
        return "; ".join(f"{e.name}: {e.error}" for e in self.errors) or super().__str__()

class ProjectValidationError(ValidationFailed):
    """Project payload was rejected."""
    def __init__(self, errors: List[ErrorItem], message: str = "Project validation error"):
        super().__init__(errors, message)

class TaskValidationError(ValidationFailed):
    """Task payload was rejected."""
    def __init__(self, errors: List[ErrorItem], message: str = "Task validation error"):
        super().__init__(errors, message)

class TimeRecordValidationError(ValidationFailed):
    """Time record payload was rejected."""
    def __init__(self, errors: List[ErrorItem], message: str = "Time record validation error"):
        super().__init__(errors, message)

# ==== NotFound ====

class IdNotFound(BaseAppException):
    """A requested id does not resolve to a stored row."""
    code = "ID-404"
    cause = "ID not found"
    status_code = 400

    def __init__(self, name: str, error: str):
        super().__init__(error, [ErrorItem(name=name, error=error)])

class ProjectNotFound(IdNotFound):
    def __init__(self, project_id: int):
        super().__init__("ProjectId", f"Project with ID {project_id} does not exist.")

class TaskNotFound(IdNotFound):
    def __init__(self, task_id: int):
        super().__init__("TaskId", f"Task with ID {task_id} does not exist.")

class TimeRecordNotFound(IdNotFound):
    def __init__(self, time_record_id: int):
        super().__init__("TimeRecordId", f"Time record with ID {time_record_id} does not exist.")

# ==== Persistence ====

class PersistenceError(BaseAppException):
    """The database refused a write."""
    code = "SQL-500"
    cause = "Database error"
    status_code = 500

    def __init__(self, message: str = "Database error while saving changes."):
        super().__init__(message, [ErrorItem(name="Database", error=message)])

class OperationAborted(BaseAppException):
    """A create/update was cancelled by the caller before it was committed."""
    code = "REQ-499"
    cause = "Request aborted"
    status_code = 499

    def __init__(self, message: str = "Operation aborted before commit."):
        super().__init__(message)

# ==== Local time tracker ====

class TimerError(BaseAppException):
    """Local time tracker error."""
    code = "TMR-400"
    cause = "Timer error"
    status_code = 400

    def __init__(self, message: str = "Time registration timer error"):
        super().__init__(message, [ErrorItem(name="Timer", error=message)])

class TimerAlreadyRunning(TimerError):
    def __init__(self, message: str = "Time registration timer is already running."):
        super().__init__(message)

class TimerNotRunning(TimerError):
    def __init__(self, message: str = "Time registration timer is not running."):
        super().__init__(message)
