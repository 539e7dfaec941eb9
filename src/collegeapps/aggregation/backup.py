"""JSON backup of the college-grouped view.

Writes the all-by-college aggregation to disk. The file is a snapshot
only; nothing reads it back.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from collegeapps.aggregation.formatter import AllByCollege
from collegeapps.core.applications import get_applications
from collegeapps.store.base import ApplicationStore

logger = logging.getLogger(__name__)

DEFAULT_BACKUP_PATH = Path("backup/backup.json")
BACKUP_PATH_ENV = "COLLEGEAPPS_BACKUP_PATH"


def resolve_backup_path(path: Path | None = None) -> Path:
    """Resolve the backup path from argument, environment, or default."""
    if path is not None:
        return Path(path)
    return Path(os.environ.get(BACKUP_PATH_ENV, str(DEFAULT_BACKUP_PATH)))


def write_backup(store: ApplicationStore, path: Path | None = None) -> bool:
    """Write every college's ranked applications to a JSON file.

    Parent directories are created as needed. Filesystem errors are
    logged and reported through the return value.

    Args:
        store: Application store to read from.
        path: Target file. Defaults to $COLLEGEAPPS_BACKUP_PATH or
            backup/backup.json.

    Returns:
        True if the file was written, False on a filesystem error.
    """
    path = resolve_backup_path(path)
    colleges = get_applications(store, AllByCollege())

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(colleges, indent=4))
    except OSError:
        logger.exception("Failed to write backup to %s", path)
        return False

    logger.info("Wrote backup of %d colleges to %s", len(colleges), path)
    return True
