"""Pydantic models for the college applications API.

Request bodies carry the validation constraints; response models
describe the aggregated views returned by the read endpoints.
"""

from pydantic import BaseModel, Field

from collegeapps.models.domain import (
    COLLEGE_MAX_LENGTH,
    COLLEGE_MIN_LENGTH,
    NAME_MIN_LENGTH,
    SCORE_MAX,
    SCORE_MIN,
)


class ApplicationSubmission(BaseModel):
    """Application form posted by an applicant."""

    name: str = Field(..., min_length=NAME_MIN_LENGTH)
    college: str = Field(..., min_length=COLLEGE_MIN_LENGTH, max_length=COLLEGE_MAX_LENGTH)
    score: float = Field(..., ge=SCORE_MIN, le=SCORE_MAX, strict=True)


class CollegeScore(BaseModel):
    """One application as seen from the applicant's side."""

    college: str
    score: int | float


class ApplicantScore(BaseModel):
    """One application as seen from the college's side."""

    name: str
    score: int | float


class ApplicantApplications(BaseModel):
    """All applications submitted by one applicant, best score first."""

    name: str
    applications: list[CollegeScore]


class CollegeApplications(BaseModel):
    """All applications received by one college, best score first."""

    college: str
    applications: list[ApplicantScore]


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Client error body for duplicates and missing lookups."""

    error: str
    message: str
