"""Colleges API endpoint.

GET /colleges - All applications grouped by college
GET /colleges/{name} - One college's applications
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from collegeapps.aggregation.formatter import AllByCollege, SingleCollege
from collegeapps.api.app import get_store
from collegeapps.core.applications import get_applications
from collegeapps.models.types import ApplicantScore, CollegeApplications, ErrorResponse
from collegeapps.store.base import ApplicationStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/colleges", response_model=dict[str, list[ApplicantScore]])
def list_colleges(store: ApplicationStore = Depends(get_store)):
    """Get every college's applicants, best score first."""
    try:
        return get_applications(store, AllByCollege())
    except SQLAlchemyError as e:
        logger.exception("Error getting college applicants")
        raise HTTPException(status_code=500, detail="Error getting colleges") from e


@router.get(
    "/colleges/{name}",
    response_model=CollegeApplications,
    responses={404: {"model": ErrorResponse}},
)
def get_college(name: str, store: ApplicationStore = Depends(get_store)):
    """Get one college's applicants, best score first.

    Args:
        name: College name (exact match).
        store: Application store (injected).

    Raises:
        HTTPException: 500 if the store fails.
    """
    try:
        college = get_applications(store, SingleCollege(name))
    except SQLAlchemyError as e:
        logger.exception("Error getting applications for college %r", name)
        raise HTTPException(status_code=500, detail="Error getting college") from e

    if college is None:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error="not found", message="No applications exist for that college"
            ).model_dump(),
        )

    return college
