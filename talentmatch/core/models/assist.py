"""Request/response schemas for resume writing assistance."""

from pydantic import Field

from .base import TalentMatchBaseModel


class SummaryRequest(TalentMatchBaseModel):
    """Profile fields used to draft a professional summary."""

    title: str | None = None
    desired_role: str | None = None
    experience_years: str | None = None
    skills: list[str] = Field(default_factory=list)
    current_summary: str | None = None


class SummaryResponse(TalentMatchBaseModel):
    summary: str


class BulletRequest(TalentMatchBaseModel):
    """A resume bullet to rewrite, with optional role context."""

    bullet: str = Field(..., description="Original bullet text")
    role_context: str | None = None


class BulletResponse(TalentMatchBaseModel):
    bullet: str
