"""Applications API endpoint.

POST /applications - Submit an application
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from collegeapps.api.app import get_store
from collegeapps.core.applications import submit_application
from collegeapps.models.domain import ApplicationRecord
from collegeapps.models.types import ApplicationSubmission, ErrorResponse, MessageResponse
from collegeapps.store.base import ApplicationStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/applications",
    response_model=MessageResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def create_application(
    submission: ApplicationSubmission,
    store: ApplicationStore = Depends(get_store),
):
    """Submit an application to a college.

    Args:
        submission: Application form data (validated).
        store: Application store (injected).

    Returns:
        MessageResponse on success, or a 400 ErrorResponse if the
        applicant already applied to this college.

    Raises:
        HTTPException: 500 if the store fails.
    """
    record = ApplicationRecord(
        name=submission.name,
        college=submission.college,
        score=submission.score,
    )

    try:
        result = submit_application(store, record)
    except SQLAlchemyError as e:
        logger.exception("Error creating application for %r", submission.name)
        raise HTTPException(status_code=500, detail="Error creating application") from e

    if not result.accepted:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="bad request", message=result.message).model_dump(),
        )

    return MessageResponse(message=result.message)
