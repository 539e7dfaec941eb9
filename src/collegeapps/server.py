"""Command-line entry point that serves the API with uvicorn.

Usage:
    collegeapps-server [port] [--host HOST]

Environment:
    COLLEGEAPPS_DB_PATH      SQLite database file (default data/collegeapps.db)
    COLLEGEAPPS_BACKUP_PATH  Backup JSON file (default backup/backup.json)
    COLLEGEAPPS_LOG_LEVEL    Logging level (default INFO)
"""

from __future__ import annotations

import argparse
import logging
import os

import uvicorn

from collegeapps.api.app import create_app

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3210
LOG_LEVEL_ENV = "COLLEGEAPPS_LOG_LEVEL"

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the optional port and --host arguments."""
    parser = argparse.ArgumentParser(description="Serve the college applications API")
    parser.add_argument("port", nargs="?", type=int, default=DEFAULT_PORT)
    parser.add_argument("--host", default=DEFAULT_HOST)
    return parser.parse_args(argv)


def configure_logging() -> None:
    """Configure root logging from $COLLEGEAPPS_LOG_LEVEL."""
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """Serve the API with uvicorn until interrupted."""
    args = parse_args(argv)
    configure_logging()
    logger.info("Server running on http://%s:%d", args.host, args.port)
    uvicorn.run(create_app(), host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
