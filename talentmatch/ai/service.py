"""AI service: prompt, generate, interpret."""

from ..core.models.assist import BulletRequest, BulletResponse, SummaryRequest, SummaryResponse
from ..core.models.candidate import CandidateForScoring, CandidateScore
from ..integrations.ollama_client import OllamaClient
from ..observability.logger import get_logger
from . import interpreter, prompts


class AiService:
    """Resume assistance and candidate scoring backed by a text-generation model.

    Stateless between calls. :class:`~talentmatch.integrations.ollama_client.GatewayError`
    from the client propagates; malformed completions never raise.
    """

    def __init__(self, client: OllamaClient | None = None):
        self.client = client or OllamaClient()
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}")

    async def generate_summary(self, request: SummaryRequest) -> SummaryResponse:
        """Draft a 3-5 sentence professional summary."""
        raw = await self.client.generate(prompts.build_summary_prompt(request))
        return SummaryResponse(summary=interpreter.interpret_summary(raw))

    async def improve_bullet(self, request: BulletRequest) -> BulletResponse:
        """Rewrite a resume bullet to be action-oriented and impact-focused."""
        raw = await self.client.generate(prompts.build_bullet_prompt(request))
        return BulletResponse(bullet=interpreter.interpret_bullet(raw, request.bullet))

    async def score_candidates_against_role(
        self,
        candidates: list[CandidateForScoring],
        role_description: str,
    ) -> list[CandidateScore]:
        """Score every candidate against a role description.

        A blank role description or an empty candidate list scores everyone 0
        with an empty insight, without calling the model.

        Args:
            candidates: Candidates to score, in caller order
            role_description: Free-text hiring need

        Returns:
            At most one score per candidate
        """
        if not role_description.strip() or not candidates:
            return [
                CandidateScore(candidate_id=candidate.id, score=0, insight="")
                for candidate in candidates
            ]

        self.logger.info("scoring_candidates", candidates=len(candidates))

        prompt = prompts.build_scoring_prompt(candidates, role_description)
        raw = await self.client.generate(prompt)
        scores = interpreter.interpret_scores(raw, candidates)

        self.logger.info("candidates_scored", requested=len(candidates), scored=len(scores))
        return scores
