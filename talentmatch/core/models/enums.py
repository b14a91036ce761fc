"""Enumeration types for TalentMatch models."""

from enum import Enum


class UserRole(str, Enum):
    """Account role owning a profile."""

    CANDIDATE = "CANDIDATE"
    RECRUITER = "RECRUITER"


class Visibility(str, Enum):
    """Whether recruiters may discover a candidate profile."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
