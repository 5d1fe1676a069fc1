from typing import Optional


class TaskError(Exception):
    """Base class for errors raised by the task domain."""

    status_code = 500
    message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(TaskError):
    status_code = 400
    message = "Invalid input"


class InvalidTaskIdError(ValidationError):
    message = "Invalid task ID"

    def __init__(self, raw_id: str):
        super().__init__()
        self.raw_id = raw_id


class TaskNotFoundError(TaskError):
    status_code = 404
    message = "Task not found"

    def __init__(self, task_id: int):
        super().__init__()
        self.task_id = task_id
