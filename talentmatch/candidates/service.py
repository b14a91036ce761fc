"""Candidate search, compare, and insight for recruiters."""

from typing import Any

from ..ai.service import AiService
from ..core.models.candidate import CandidateRecord, CandidateResult, InsightResult
from ..core.storage.candidate_store import CandidateStore
from ..observability.logger import get_logger
from .aggregator import ScoreAggregator
from .projection import to_candidate_result, to_scoring_input

logger = get_logger(__name__)


class CandidateNotFoundError(LookupError):
    """No discoverable candidate profile with that id."""

    def __init__(self, candidate_id: int):
        super().__init__(f"Candidate profile not found: {candidate_id}")
        self.candidate_id = candidate_id


def _valid_ids(candidate_ids: list[Any]) -> list[int]:
    ids = []
    for value in candidate_ids:
        if isinstance(value, bool):
            continue
        if isinstance(value, int):
            ids.append(value)
        elif isinstance(value, float) and value.is_integer():
            ids.append(int(value))
    return ids


class CandidatesService:
    """Recruiter operations over the candidate store."""

    def __init__(self, store: CandidateStore, ai_service: AiService):
        self.store = store
        self.aggregator = ScoreAggregator(ai_service)

    def search(
        self,
        query: str,
        experience_level: str | None = None,
        location: str | None = None,
    ) -> list[CandidateResult]:
        records = self.store.search(query.strip(), experience_level, location)
        logger.info("candidates_searched", query_length=len(query), results=len(records))
        return [to_candidate_result(r) for r in records]

    def find_all(self) -> list[CandidateResult]:
        return [to_candidate_result(r) for r in self.store.list_public()]

    async def compare_candidates(
        self,
        role_description: str,
        candidate_ids: list[Any],
    ) -> list[CandidateResult]:
        """Rank a shortlist against a role description.

        Ids that are not integers or not in the store are ignored.
        """
        records = self.store.get_many(_valid_ids(candidate_ids))
        results = [to_candidate_result(r) for r in records]
        scoring_inputs = [to_scoring_input(r) for r in records]

        compared = await self.aggregator.compare(results, scoring_inputs, role_description)

        logger.info(
            "candidates_compared",
            requested=len(candidate_ids),
            found=len(records),
            with_insight=sum(1 for c in compared if c.ai_insight),
        )
        return compared

    async def get_insight_for_candidate(
        self,
        candidate_id: int,
        role_description: str | None = None,
    ) -> InsightResult:
        record = self.store.get(candidate_id)
        if record is None:
            return InsightResult(insight="", match_score=0)

        return await self.aggregator.insight(to_scoring_input(record), role_description)

    def get_public_candidate(self, candidate_id: int) -> CandidateRecord:
        record = self.store.get(candidate_id)
        if record is None or not record.is_discoverable:
            raise CandidateNotFoundError(candidate_id)
        return record
