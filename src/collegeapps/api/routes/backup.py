"""Backup API endpoint.

POST /backup - Write the college-grouped view to a JSON file
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from collegeapps.aggregation.backup import write_backup
from collegeapps.api.app import get_backup_path, get_store
from collegeapps.models.types import MessageResponse
from collegeapps.store.base import ApplicationStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/backup", response_model=MessageResponse)
def create_backup(
    store: ApplicationStore = Depends(get_store),
    backup_path: Path = Depends(get_backup_path),
) -> MessageResponse:
    """Back up all applications, grouped by college, to disk.

    Raises:
        HTTPException: 500 if the store fails or the file cannot be written.
    """
    try:
        written = write_backup(store, backup_path)
    except SQLAlchemyError as e:
        logger.exception("Error reading applications for backup")
        raise HTTPException(status_code=500, detail="Backup failed") from e

    if not written:
        raise HTTPException(status_code=500, detail="Backup failed")

    return MessageResponse(message="Backup successful")
