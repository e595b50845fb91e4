"""Pydantic contracts shared by the ATS services and the API layer."""

from models.schemas.job_role import JobRole
from models.schemas.match_result import MatchResult

__all__ = [
    "JobRole",
    "MatchResult",
]
