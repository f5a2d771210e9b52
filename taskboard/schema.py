"""Idempotent schema setup, run every time a store is opened."""

import structlog
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from taskboard.database import Base
from taskboard.errors import StorageError
from taskboard.models.project import Project  # noqa: F401  registers the table
from taskboard.models.task import Task  # noqa: F401

log = structlog.get_logger()

# Stamp updated_at when an UPDATE left it unchanged. Statements that already
# set it (the ORM's onupdate) skip the trigger body.
_TRIGGERS = [
    """
    CREATE TRIGGER IF NOT EXISTS trg_projects_updated
    AFTER UPDATE ON projects
    FOR EACH ROW WHEN NEW.updated_at = OLD.updated_at
    BEGIN
        UPDATE projects SET updated_at = CURRENT_TIMESTAMP WHERE id = OLD.id;
    END
    """,
    """
    CREATE TRIGGER IF NOT EXISTS trg_tasks_updated
    AFTER UPDATE ON tasks
    FOR EACH ROW WHEN NEW.updated_at = OLD.updated_at
    BEGIN
        UPDATE tasks SET updated_at = CURRENT_TIMESTAMP WHERE id = OLD.id;
    END
    """,
]


def ensure_schema(engine: Engine) -> None:
    """Create tables, indexes and update triggers if they are missing."""
    try:
        # create_all uses IF NOT EXISTS semantics (checkfirst) for tables and indexes
        Base.metadata.create_all(bind=engine)
        with engine.begin() as conn:
            for ddl in _TRIGGERS:
                conn.execute(text(ddl))
    except SQLAlchemyError as exc:
        log.error("schema_setup_failed", error=str(exc))
        raise StorageError(f"migration failed: {exc}") from exc
