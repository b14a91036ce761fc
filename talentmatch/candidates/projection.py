"""Build pipeline projections from stored candidate rows.

Stored resume sections are JSON strings written by the profile editor; any of
them may be empty or malformed, in which case they contribute nothing.
"""

import json
from typing import Any

from ..core.models.candidate import CandidateForScoring, CandidateRecord, CandidateResult

MAX_HIGHLIGHTS = 5
HIGHLIGHTS_PER_JOB = 2
DATE_SEPARATOR = " – "
RESUME_TEXT_MAX_CHARS = 10000


def _load_list(raw: str | None) -> list[Any]:
    try:
        value = json.loads(raw or "[]")
    except (TypeError, ValueError):
        return []
    return value if isinstance(value, list) else []


def parse_json_array(raw: str | None) -> list[Any]:
    """Decode a JSON list, ``[]`` for anything else."""
    return _load_list(raw)


def _skills(raw: str | None) -> list[str]:
    return [str(skill) for skill in _load_list(raw) if skill is not None]


def _bullets(entry: dict[str, Any]) -> list[str]:
    bullets = entry.get("bullets")
    return [str(b) for b in bullets] if isinstance(bullets, list) else []


def extract_highlights(experience_json: str | None) -> list[str]:
    """First two bullets of each job, five at most overall."""
    highlights: list[str] = []
    for job in _load_list(experience_json):
        if isinstance(job, dict):
            highlights.extend(_bullets(job)[:HIGHLIGHTS_PER_JOB])
    return highlights[:MAX_HIGHLIGHTS]


def _joined(*values: Any, sep: str) -> str:
    return sep.join(str(v) for v in values if v)


def _job_line(job: dict[str, Any]) -> str | None:
    if not job.get("title") and not job.get("company"):
        return None

    line = _joined(job.get("title"), job.get("company"), sep=" at ")
    dates = _joined(job.get("startDate"), job.get("endDate"), sep=DATE_SEPARATOR)
    if dates:
        line += f" ({dates})"
    bullets = _bullets(job)
    if bullets:
        line += ": " + "; ".join(bullets)
    return line


def _education_line(entry: dict[str, Any]) -> str | None:
    if not entry.get("school") and not entry.get("degree"):
        return None

    line = _joined(entry.get("school"), entry.get("degree"), sep=", ")
    dates = _joined(entry.get("startDate"), entry.get("endDate"), sep=DATE_SEPARATOR)
    return f"{line} ({dates})" if dates else line


def build_work_experience_summary(
    experience_json: str | None,
    education_json: str | None = None,
) -> str:
    """Narrate jobs, achievements and education as one string for the scoring prompt.

    Example:
        "Engineer at Acme (2020 – 2023): Shipped X; Cut Y. Education: MIT, BSc"
    """
    parts: list[str] = []
    for job in _load_list(experience_json):
        line = _job_line(job) if isinstance(job, dict) else None
        if line:
            parts.append(line)

    education: list[str] = []
    for entry in _load_list(education_json):
        line = _education_line(entry) if isinstance(entry, dict) else None
        if line:
            education.append(line)
    if education:
        parts.append("Education: " + "; ".join(education))

    return ". ".join(parts)


def build_resume_text(record: CandidateRecord) -> str:
    """Flatten a profile into the plain text that keyword search matches against."""
    parts = [
        record.summary,
        record.title,
        record.experience_years,
        record.location,
        record.desired_role,
    ]

    for job in parse_json_array(record.experience_json):
        if isinstance(job, dict):
            parts += [job.get("title"), job.get("company"), " ".join(_bullets(job))]

    parts.append(" ".join(_skills(record.skills_json)))

    for entry in parse_json_array(record.education_json):
        if isinstance(entry, dict):
            parts += [entry.get("school"), entry.get("degree")]

    return " ".join(str(part) for part in parts if part)[:RESUME_TEXT_MAX_CHARS]


def to_candidate_result(record: CandidateRecord, with_highlights: bool = True) -> CandidateResult:
    """Unscored recruiter-facing card for a stored profile."""
    return CandidateResult(
        id=record.id,
        name=record.name or "",
        title=record.title or "",
        experience=record.experience_years or "",
        location=record.location or "",
        match_score=0,
        skills=_skills(record.skills_json),
        ai_insight="",
        highlights=extract_highlights(record.experience_json) if with_highlights else [],
    )


def to_scoring_input(record: CandidateRecord) -> CandidateForScoring:
    """Flattened view of a stored profile for the scoring prompt."""
    return CandidateForScoring(
        id=record.id,
        name=record.name or "",
        title=record.title or "",
        experience=record.experience_years or "",
        location=record.location or "",
        skills=_skills(record.skills_json),
        summary=record.summary,
        # Empty narrative renders as the "not provided" placeholder
        work_experience=build_work_experience_summary(
            record.experience_json, record.education_json
        ) or None,
    )
