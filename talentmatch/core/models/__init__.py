"""TalentMatch data models for candidates, scoring, and resume assistance."""

from .assist import BulletRequest, BulletResponse, SummaryRequest, SummaryResponse
from .base import TalentMatchBaseModel
from .candidate import (
    CandidateForScoring,
    CandidateRecord,
    CandidateResult,
    CandidateScore,
    InsightResult,
)
from .enums import UserRole, Visibility

__all__ = [
    # Base
    "TalentMatchBaseModel",
    # Enums
    "UserRole",
    "Visibility",
    # Candidates
    "CandidateRecord",
    "CandidateForScoring",
    "CandidateScore",
    "CandidateResult",
    "InsightResult",
    # Resume assistance
    "SummaryRequest",
    "SummaryResponse",
    "BulletRequest",
    "BulletResponse",
]
