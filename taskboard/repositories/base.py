from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from taskboard.errors import ConflictError, NotFoundError, StorageError, StoreError


class Repository:
    """Shared transaction handling for the project and task repositories."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        """One session, one transaction: commit on success, rollback on any error.

        Database errors leave here as StoreError subclasses with the driver
        error chained.
        """
        try:
            with self._session_factory.begin() as session:
                yield session
        except StoreError:
            raise
        except IntegrityError as exc:
            raise _translate_integrity_error(exc) from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"database error: {exc}") from exc


def _translate_integrity_error(exc: IntegrityError) -> StoreError:
    message = str(exc.orig)
    if "UNIQUE constraint failed: projects.name" in message:
        return ConflictError("project name already exists")
    if "FOREIGN KEY constraint failed" in message:
        return NotFoundError("project not found")
    return StorageError(f"constraint violation: {message}")
