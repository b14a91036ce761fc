"""Prompt templates for summary writing, bullet rewriting, and candidate scoring.

Every template slot is always rendered, empty when the value is missing, so
the model always sees the same prompt shape.
"""

from ..core.models.assist import BulletRequest, SummaryRequest
from ..core.models.candidate import CandidateForScoring

NO_WORK_EXPERIENCE = "(none or not provided)"


def _text(value: str | None) -> str:
    return value if value is not None else ""


def build_summary_prompt(request: SummaryRequest) -> str:
    """Build the professional-summary prompt."""
    skills_text = ", ".join(request.skills or [])

    return f"""You are a resume writing assistant.

Write a concise, compelling professional summary for a candidate.

Candidate title: {_text(request.title)}
Desired role: {_text(request.desired_role)}
Years of experience: {_text(request.experience_years)}
Skills: {skills_text}
Current summary (if any): {_text(request.current_summary)}

Rules:
- 3-5 sentences.
- Focus on impact, quantifiable outcomes, and core strengths.
- Do not mention years in every sentence.

Respond ONLY in this exact JSON format (no markdown, no commentary):
{{
  "summary": "..."
}}"""


def build_bullet_prompt(request: BulletRequest) -> str:
    """Build the resume-bullet rewrite prompt."""
    return f"""You are improving resume bullet points for a candidate.

Original bullet:
"{request.bullet}"

Role context: {_text(request.role_context)}

Rewrite this bullet to be:
- clear, concise, and action-oriented
- focused on impact and measurable results if possible
- suitable for a modern software engineer resume

Respond ONLY in this exact JSON format (no markdown, no commentary):
{{
  "bullet": "..."
}}"""


def _candidate_block(index: int, candidate: CandidateForScoring) -> str:
    work_experience = (
        candidate.work_experience
        if candidate.work_experience is not None
        else NO_WORK_EXPERIENCE
    )
    return f"""Candidate #{index}
id: {candidate.id}
name: {candidate.name}
title: {candidate.title}
years of experience: {candidate.experience}
location: {candidate.location}
skills: {", ".join(candidate.skills or [])}
summary: {_text(candidate.summary)}
work experience and achievements: {work_experience}"""


def build_scoring_prompt(candidates: list[CandidateForScoring], role_description: str) -> str:
    """Build the multi-candidate scoring prompt.

    One block per candidate (labelled from 1), then the role description,
    then instructions to answer with a JSON array of
    ``{candidateId, score, insight}`` objects.
    """
    candidates_block = "\n\n".join(
        _candidate_block(index, candidate)
        for index, candidate in enumerate(candidates, start=1)
    )

    return f"""You are an expert technical recruiter.

You are given a role description and several candidates. For each candidate,
assign a match score from 0 to 100 and a one-sentence insight explaining job fit.

Base the match score and insight on the candidate's actual work experience, achievements,
and how they relate to the role. Consider technologies used, impact described, and
relevance to the role. For candidates with no work experience (freshers), consider
education, skills, and potential fit.

Candidates:
{candidates_block}

Role description:
{role_description}

Respond ONLY in JSON, as an array of objects, one per candidate, in this format:
[
  {{
    "candidateId": 1,
    "score": 87,
    "insight": "Strong React and TypeScript experience, matches senior frontend requirements."
  }}
]
"""
