"""Applicants API endpoint.

GET /applicants - All applications grouped by applicant
GET /applicants/{name} - One applicant's applications
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from collegeapps.aggregation.formatter import AllByApplicant, SingleApplicant
from collegeapps.api.app import get_store
from collegeapps.core.applications import get_applications
from collegeapps.models.types import ApplicantApplications, CollegeScore, ErrorResponse
from collegeapps.store.base import ApplicationStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/applicants", response_model=dict[str, list[CollegeScore]])
def list_applicants(store: ApplicationStore = Depends(get_store)):
    """Get every applicant's applications, best score first.

    Raises:
        HTTPException: 500 if the store fails.
    """
    try:
        return get_applications(store, AllByApplicant())
    except SQLAlchemyError as e:
        logger.exception("Error getting applicants")
        raise HTTPException(status_code=500, detail="Error getting applicants") from e


@router.get(
    "/applicants/{name}",
    response_model=ApplicantApplications,
    responses={404: {"model": ErrorResponse}},
)
def get_applicant(name: str, store: ApplicationStore = Depends(get_store)):
    """Get one applicant's applications, best score first.

    Args:
        name: Applicant name (exact match).
        store: Application store (injected).

    Raises:
        HTTPException: 500 if the store fails.
    """
    try:
        applicant = get_applications(store, SingleApplicant(name))
    except SQLAlchemyError as e:
        logger.exception("Error getting applications for applicant %r", name)
        raise HTTPException(status_code=500, detail="Error getting applicant") from e

    if applicant is None:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error="not found", message="No applications exist for that name"
            ).model_dump(),
        )

    return applicant
