"""Recover structured answers from free-form model completions.

Small local models wrap JSON in prose, markdown fences, or nothing at all.
Nothing here raises on bad model output: each operation has a fixed fallback
ladder and callers rely on those exact degraded shapes.
"""

import json
import math
import re
from typing import Any

from ..core.models.candidate import CandidateForScoring, CandidateScore
from ..observability.logger import get_logger

logger = get_logger(__name__)

# First object or array, from its opening bracket to the last matching closer
JSON_SPAN = re.compile(r"\{[\s\S]*\}|\[[\s\S]*\]")

SUMMARY_MAX_CHARS = 600
BULLET_MAX_CHARS = 300
MAX_SCORE = 100
FALLBACK_TOP_SCORE = 70

DEFAULT_SUMMARY = "Experienced professional with a strong background in software engineering."
DEFAULT_INSIGHT = "Relevant experience and skills for the role."
FALLBACK_INSIGHT = "Strong overlap between experience and role description."


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def extract_json(raw: str) -> Any | None:
    """Parse the first JSON object or array embedded in ``raw``.

    ``NaN`` and ``Infinity`` literals are not JSON and fail the parse, as
    does nesting too deep for the decoder.

    Returns:
        The parsed value, or None when nothing parses
    """
    match = JSON_SPAN.search(raw or "")
    candidate = match.group(0) if match else (raw or "")
    try:
        return json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning("ai_json_parse_failed", error=str(e), raw_preview=(raw or "")[:200])
        return None


def interpret_summary(raw: str) -> str:
    parsed = extract_json(raw)
    if isinstance(parsed, dict) and isinstance(parsed.get("summary"), str):
        return parsed["summary"].strip()

    return (raw or "").strip()[:SUMMARY_MAX_CHARS] or DEFAULT_SUMMARY


def interpret_bullet(raw: str, original_bullet: str) -> str:
    parsed = extract_json(raw)
    if isinstance(parsed, dict) and isinstance(parsed.get("bullet"), str):
        return parsed["bullet"].strip()

    first_line = (raw or "").strip().split("\n")[0]
    return first_line[:BULLET_MAX_CHARS] or original_bullet


def _to_number(value: Any) -> float | None:
    """Numeric value of a model-supplied field, None when it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _clamp_score(value: Any) -> int:
    number = _to_number(value) or 0.0
    # Halves round up: 50.5 -> 51
    return math.floor(max(0.0, min(float(MAX_SCORE), number)) + 0.5)


def _score_item(item: Any) -> CandidateScore | None:
    if not isinstance(item, dict):
        return None

    candidate_id = _to_number(item.get("candidateId"))
    if candidate_id is None or not candidate_id.is_integer():
        return None

    insight = item.get("insight")
    return CandidateScore(
        candidate_id=int(candidate_id),
        score=_clamp_score(item.get("score")),
        insight=insight.strip() if isinstance(insight, str) else DEFAULT_INSIGHT,
    )


def fallback_scores(candidates: list[CandidateForScoring]) -> list[CandidateScore]:
    """Synthetic ranking used when the model did not answer with an array.

    Scores descend from 70 by input position and stop at 0.
    """
    return [
        CandidateScore(
            candidate_id=candidate.id,
            score=max(0, FALLBACK_TOP_SCORE - index),
            insight=FALLBACK_INSIGHT,
        )
        for index, candidate in enumerate(candidates)
    ]


def interpret_scores(raw: str, candidates: list[CandidateForScoring]) -> list[CandidateScore]:
    """Turn a scoring completion into per-candidate scores.

    A JSON array yields one score per usable element: elements without a
    numeric id, or with an id that is not one of ``candidates``, are dropped,
    and a repeated id keeps its last entry. Anything else yields
    :func:`fallback_scores`.
    """
    parsed = extract_json(raw)
    if not isinstance(parsed, list):
        logger.warning(
            "ai_scoring_fallback",
            reason="non-array response",
            candidates=len(candidates),
        )
        return fallback_scores(candidates)

    known_ids = {candidate.id for candidate in candidates}
    by_id: dict[int, CandidateScore] = {}
    dropped = 0
    for item in parsed:
        score = _score_item(item)
        if score is None or score.candidate_id not in known_ids:
            dropped += 1
            continue
        by_id[score.candidate_id] = score

    if dropped:
        logger.info("ai_scores_dropped", dropped=dropped, kept=len(by_id))

    return list(by_id.values())
