from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ProjectIn(BaseModel):
    """Body for both create and update; the store validates the name."""

    name: str
    color: Optional[str] = ""

    @field_validator("color")
    @classmethod
    def color_none_is_empty(cls, v):
        return (v or "").strip()


class ProjectOut(BaseModel):
    id: int
    name: str
    color: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
