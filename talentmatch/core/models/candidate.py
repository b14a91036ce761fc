"""Candidate models: stored rows, scoring projections, and recruiter-facing results."""

from datetime import datetime

from pydantic import Field

from .base import TalentMatchBaseModel
from .enums import UserRole, Visibility


# =============================================================================
# Stored profile
# =============================================================================


class CandidateRecord(TalentMatchBaseModel):
    """A candidate profile row as kept by the candidate repository.

    Resume sections (skills, experience, education, projects, certifications)
    are JSON-encoded strings, exactly as the profile editor saves them.
    """

    id: int = Field(..., description="Profile identifier")
    name: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Account email")
    role: UserRole = Field(UserRole.CANDIDATE, description="Owning account role")
    title: str | None = Field(None, description="Current title")
    summary: str | None = Field(None, description="Professional summary")
    location: str | None = Field(None, description="Location text")
    experience_years: str | None = Field(None, description="Years of experience, free text")
    desired_role: str | None = Field(None, description="Role the candidate is looking for")
    professional_email: str | None = None
    contact_number: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    skills_json: str | None = Field("[]", description="JSON list of skill names")
    experience_json: str | None = Field("[]", description="JSON list of jobs")
    education_json: str | None = Field("[]", description="JSON list of education entries")
    projects_json: str | None = Field("[]", description="JSON list of projects")
    certifications_json: str | None = Field("[]", description="JSON list of certifications")
    resume_text: str | None = Field(None, description="Flattened resume text used for keyword search")
    visibility: Visibility = Field(Visibility.PRIVATE, description="Discoverability")
    profile_completed_at: datetime | None = Field(None, description="Onboarding completion time")

    @property
    def is_discoverable(self) -> bool:
        """Public, onboarded candidate profiles are the only ones recruiters see."""
        return (
            self.role == UserRole.CANDIDATE
            and self.visibility == Visibility.PUBLIC
            and self.profile_completed_at is not None
        )


# =============================================================================
# Scoring pipeline values
# =============================================================================


class CandidateForScoring(TalentMatchBaseModel):
    """Flattened, read-only view of a candidate handed to the prompt builder."""

    id: int = Field(..., description="Candidate identifier")
    name: str = ""
    title: str = ""
    experience: str = Field("", description="Years of experience text")
    location: str = ""
    skills: list[str] = Field(default_factory=list)
    summary: str | None = None
    work_experience: str | None = Field(
        None,
        description="Jobs, achievements and education joined into one narrative",
    )


class CandidateScore(TalentMatchBaseModel):
    """Model-estimated fit of one candidate for one role description."""

    candidate_id: int = Field(..., description="Candidate identifier")
    score: int = Field(..., ge=0, le=100, description="Match score")
    insight: str = Field("", description="One-sentence justification")


class CandidateResult(TalentMatchBaseModel):
    """Candidate card returned to recruiters from search and compare."""

    id: int
    name: str = ""
    title: str = ""
    experience: str = ""
    location: str = ""
    match_score: int = Field(0, ge=0, le=100)
    skills: list[str] = Field(default_factory=list)
    ai_insight: str = ""
    highlights: list[str] = Field(default_factory=list)


class InsightResult(TalentMatchBaseModel):
    """Single-candidate insight for a role."""

    insight: str = ""
    match_score: int = Field(0, ge=0, le=100)
