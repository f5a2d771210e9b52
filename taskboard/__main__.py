import argparse
import sys

import structlog
import uvicorn

from taskboard import config
from taskboard.errors import StorageError
from taskboard.logging_config import setup_logging
from taskboard.main import create_app
from taskboard.store import Store

VERSION = "1.0.0"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="taskboard", description="Project and task board server")
    parser.add_argument("--host", default=config.HOST, help="HTTP listen host")
    parser.add_argument("--port", type=int, default=config.PORT, help="HTTP listen port")
    parser.add_argument("--db", default=config.DATABASE_PATH, help="path to the SQLite database file")
    parser.add_argument("--static", default=config.STATIC_DIR, help="directory with the built frontend")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging()
    log = structlog.get_logger()
    log.info("taskboard_starting", version=VERSION)

    try:
        store = Store(args.db)
    except StorageError as exc:
        log.error("unable_to_open_database", db=args.db, error=exc.message)
        return 1

    try:
        app = create_app(store=store, static_dir=args.static)
        log.info("starting_server", host=args.host, port=args.port)
        # log_config=None keeps uvicorn on the structlog handlers set up above
        uvicorn.run(app, host=args.host, port=args.port, log_config=None)
    finally:
        store.close()

    log.info("server_stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
