import random
from typing import Optional

import structlog

from taskboard.database import create_session_factory, create_sqlite_engine
from taskboard.errors import StorageError
from taskboard.repositories.projects import ProjectRepository
from taskboard.repositories.tasks import TaskRepository
from taskboard.schema import ensure_schema

log = structlog.get_logger()


class Store:
    """Opens the SQLite file and hands out the project and task repositories.

    All repositories share one engine holding a single connection, which makes
    this store the only writer for the file it opened.
    """

    def __init__(self, db_path: str, rng: Optional[random.Random] = None):
        if not db_path:
            raise StorageError("empty database path")
        self.db_path = str(db_path)

        try:
            self._engine = create_sqlite_engine(self.db_path)
        except OSError as exc:
            raise StorageError(f"cannot prepare database directory: {exc}") from exc

        try:
            ensure_schema(self._engine)
        except StorageError:
            self._engine.dispose()
            raise

        session_factory = create_session_factory(self._engine)
        self.projects = ProjectRepository(session_factory, rng=rng)
        self.tasks = TaskRepository(session_factory)
        log.info("store_opened", db=self.db_path)

    def close(self) -> None:
        self._engine.dispose()
        log.info("store_closed", db=self.db_path)
