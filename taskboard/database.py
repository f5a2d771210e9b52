from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def _ensure_parent_dir(db_path: str) -> None:
    parent = Path(db_path).parent
    if str(parent) not in ("", "."):
        parent.mkdir(parents=True, exist_ok=True)


def create_sqlite_engine(db_path: str) -> Engine:
    """Engine bound to a single SQLite connection.

    pool_size=1 with no overflow means every session waits for the one
    connection, so all reads and writes are serialized through it.
    """
    _ensure_parent_dir(db_path)
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
        pool_size=1,
        max_overflow=0,
        pool_pre_ping=True,
    )

    @event.listens_for(engine, "connect")
    def _configure_connection(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.close()

    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    # expire_on_commit=False keeps loaded rows readable after the block exits
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
