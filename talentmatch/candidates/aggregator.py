"""Merge model scores onto recruiter-facing candidate cards."""

from ..ai.service import AiService
from ..core.models.candidate import (
    CandidateForScoring,
    CandidateResult,
    CandidateScore,
    InsightResult,
)
from ..observability.logger import get_logger

logger = get_logger(__name__)

GENERAL_ROLE = "General technical role"
INSIGHT_UNAVAILABLE = "Unable to generate insight."


def merge_scores(
    results: list[CandidateResult],
    scores: list[CandidateScore],
) -> list[CandidateResult]:
    """Annotate cards with their scores, best first.

    Cards without a score keep ``match_score`` 0 and an empty insight. Equal
    scores keep their input order.
    """
    score_by_id = {score.candidate_id: score for score in scores}

    merged = []
    for result in results:
        score = score_by_id.get(result.id)
        if score is None:
            merged.append(result)
        else:
            merged.append(
                result.model_copy(update={"match_score": score.score, "ai_insight": score.insight})
            )

    # sorted() is stable
    return sorted(merged, key=lambda r: r.match_score, reverse=True)


def _unscored(results: list[CandidateResult]) -> list[CandidateResult]:
    return [r.model_copy(update={"match_score": 0, "ai_insight": ""}) for r in results]


class ScoreAggregator:
    """Runs candidate scoring for compare and insight flows.

    Scoring failures never escape: compare degrades to the unscored list and
    insight to a fixed "unable" message.
    """

    def __init__(self, ai_service: AiService):
        self.ai_service = ai_service

    async def compare(
        self,
        results: list[CandidateResult],
        scoring_inputs: list[CandidateForScoring],
        role_description: str,
    ) -> list[CandidateResult]:
        """Score candidates against a role and order them by match score.

        Args:
            results: Unscored cards, in caller order
            scoring_inputs: Scoring projections of the same candidates
            role_description: Free-text hiring need

        Returns:
            Every input card, annotated where a score came back, best first
        """
        if not role_description.strip() or not results:
            return _unscored(results)

        try:
            scores = await self.ai_service.score_candidates_against_role(
                scoring_inputs, role_description
            )
        except Exception as e:
            logger.warning(
                "compare_scoring_failed",
                error=str(e),
                error_type=type(e).__name__,
                candidates=len(results),
            )
            return _unscored(results)

        return merge_scores(results, scores)

    async def insight(
        self,
        scoring_input: CandidateForScoring,
        role_description: str | None = None,
    ) -> InsightResult:
        """One-sentence insight and score for a single candidate."""
        role = (role_description or "").strip() or GENERAL_ROLE

        try:
            scores = await self.ai_service.score_candidates_against_role([scoring_input], role)
        except Exception as e:
            logger.warning(
                "insight_scoring_failed",
                candidate_id=scoring_input.id,
                error=str(e),
                error_type=type(e).__name__,
            )
            scores = []

        if scores:
            first = scores[0]
            return InsightResult(insight=first.insight, match_score=first.score)

        return InsightResult(insight=INSIGHT_UNAVAILABLE, match_score=0)
