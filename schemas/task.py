from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class TaskBase(BaseModel):
    """Fields a client may send for a task.

    Unknown keys (``id``, ``created_at``, ...) are ignored; the server
    assigns them.
    """

    model_config = ConfigDict(strict=True)

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None


class TaskCreate(TaskBase):
    """Body of POST /api/tasks. ``completed`` is accepted but always reset to false."""
    pass


class TaskUpdate(TaskBase):
    """Body of PUT /api/tasks/{id}. Empty strings leave a field unchanged."""
    pass


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    completed: bool
    created_at: datetime


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    version: str


class APIResponse(BaseModel, Generic[T]):
    success: bool
    message: str
    data: Optional[T] = None
