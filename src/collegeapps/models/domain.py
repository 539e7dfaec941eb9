"""Domain models for college applications.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and of the HTTP schemas,
and validate their own field constraints on construction.
"""

from __future__ import annotations

from dataclasses import dataclass

NAME_MIN_LENGTH = 1
COLLEGE_MIN_LENGTH = 3
COLLEGE_MAX_LENGTH = 50
SCORE_MIN = 0
SCORE_MAX = 100


# ============================================================================
# Application Domain
# ============================================================================


@dataclass(frozen=True)
class ApplicationRecord:
    """A single application from one applicant to one college.

    Raises:
        ValueError: If name is empty, college length is outside 3-50,
            or score is outside 0-100.
    """

    name: str
    college: str
    score: float

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or len(self.name) < NAME_MIN_LENGTH:
            raise ValueError("name must be a non-empty string")
        if not isinstance(self.college, str) or not (
            COLLEGE_MIN_LENGTH <= len(self.college) <= COLLEGE_MAX_LENGTH
        ):
            raise ValueError(
                f"college must be {COLLEGE_MIN_LENGTH}-{COLLEGE_MAX_LENGTH} characters"
            )
        if isinstance(self.score, bool) or not isinstance(self.score, (int, float)):
            raise ValueError("score must be a number")
        if not (SCORE_MIN <= self.score <= SCORE_MAX):
            raise ValueError(f"score must be between {SCORE_MIN} and {SCORE_MAX}")
