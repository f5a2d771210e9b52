from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from taskboard.models.task import TaskStatus


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = ""
    # unknown values fall back to "todo" in the store rather than failing here
    status: Optional[str] = None


class TaskUpdate(BaseModel):
    """Partial patch: a field left as None is not touched."""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class TaskOut(BaseModel):
    id: int
    project_id: int
    title: str
    description: str
    status: TaskStatus
    position: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
