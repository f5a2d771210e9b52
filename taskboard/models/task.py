import enum
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, func

from taskboard.database import Base


class TaskStatus(str, enum.Enum):
    """Board columns. Stored as the plain string value."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["TaskStatus"]:
        """Return the matching member, or None for anything outside the set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        Index("idx_tasks_project", "project_id"),
        Index("idx_tasks_project_status", "project_id", "status"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True)
    # deleting a project removes its tasks through this constraint
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, server_default="")
    status = Column(String, nullable=False, server_default=TaskStatus.TODO.value)
    position = Column(Integer, nullable=False, server_default="0")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
