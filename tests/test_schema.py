import pytest
from sqlalchemy import text

from taskboard.database import create_sqlite_engine
from taskboard.errors import StorageError
from taskboard.schema import ensure_schema
from taskboard.store import Store


def _names(engine, kind):
    with engine.connect() as conn:
        rows = conn.execute(text("SELECT name FROM sqlite_master WHERE type = :kind"), {"kind": kind})
        return {r[0] for r in rows}


def test_ensure_schema_creates_everything(tmp_path):
    engine = create_sqlite_engine(str(tmp_path / "t.db"))
    try:
        ensure_schema(engine)
        assert {"projects", "tasks"} <= _names(engine, "table")
        assert {"idx_tasks_project", "idx_tasks_project_status"} <= _names(engine, "index")
        assert {"trg_projects_updated", "trg_tasks_updated"} <= _names(engine, "trigger")
    finally:
        engine.dispose()


def test_ensure_schema_is_idempotent(tmp_path):
    engine = create_sqlite_engine(str(tmp_path / "t.db"))
    try:
        ensure_schema(engine)
        ensure_schema(engine)
        assert len(_names(engine, "trigger")) == 2
    finally:
        engine.dispose()


def test_store_creates_parent_directories(tmp_path):
    path = tmp_path / "a" / "b" / "board.db"
    s = Store(str(path))
    try:
        assert path.exists()
    finally:
        s.close()


def test_reopen_keeps_data(db_path):
    s = Store(db_path)
    p = s.projects.create_project("Launch", "")
    s.tasks.create_task(p.id, "kept")
    s.close()

    s = Store(db_path)
    try:
        assert [t.title for t in s.tasks.list_tasks(p.id)] == ["kept"]
        assert s.tasks.create_task(p.id, "next").position == 1
    finally:
        s.close()


def test_empty_path_is_rejected():
    with pytest.raises(StorageError):
        Store("")


def test_unopenable_database_is_storage_error(tmp_path):
    # a directory where the database file should be
    target = tmp_path / "dir.db"
    target.mkdir()
    with pytest.raises(StorageError):
        Store(str(target))


def test_trigger_stamps_updated_at(tmp_path):
    engine = create_sqlite_engine(str(tmp_path / "t.db"))
    try:
        ensure_schema(engine)
        with engine.begin() as conn:
            conn.execute(
                text(
                    "INSERT INTO projects (name, color, created_at, updated_at) "
                    "VALUES ('p', '#2563eb', '2000-01-01 00:00:00', '2000-01-01 00:00:00')"
                )
            )
            conn.execute(text("UPDATE projects SET color = '#dc2626' WHERE name = 'p'"))
            stamped = conn.execute(text("SELECT updated_at FROM projects WHERE name = 'p'")).scalar()
        assert stamped != "2000-01-01 00:00:00"
    finally:
        engine.dispose()


def test_foreign_keys_enforced_on_connection(store, project):
    store.tasks.create_task(project.id, "t")
    engine = store._engine
    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
