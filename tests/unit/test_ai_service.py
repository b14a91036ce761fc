"""AiService wiring: short-circuits, fallbacks, and error propagation."""

import asyncio

import pytest

from talentmatch.ai.interpreter import DEFAULT_SUMMARY
from talentmatch.ai.service import AiService
from talentmatch.core.models.assist import BulletRequest, SummaryRequest
from talentmatch.core.models.candidate import CandidateForScoring
from talentmatch.integrations.ollama_client import GatewayError

CANDIDATES = [CandidateForScoring(id=i, name=f"C{i}") for i in (1, 2, 3)]


@pytest.mark.parametrize(
    "completion, expected",
    [
        ('{"summary": "  Builds reliable systems.  "}', "Builds reliable systems."),
        ('Here it is: {"summary": "Ships fast."} thanks', "Ships fast."),
        ("Plain prose summary.", "Plain prose summary."),
        ("", DEFAULT_SUMMARY),
    ],
)
def test_generate_summary(stub_client, completion, expected):
    service = AiService(stub_client(completion))
    response = asyncio.run(service.generate_summary(SummaryRequest(title="Engineer")))
    assert response.summary == expected


def test_improve_bullet_identity_fallback(stub_client):
    service = AiService(stub_client(""))
    response = asyncio.run(service.improve_bullet(BulletRequest(bullet="Did work")))
    assert response.bullet == "Did work"


def test_improve_bullet_from_json(stub_client):
    client = stub_client('{"bullet": "Cut deploy time 40% by automating releases"}')
    response = asyncio.run(AiService(client).improve_bullet(BulletRequest(bullet="Did deploys")))
    assert response.bullet == "Cut deploy time 40% by automating releases"
    assert '"Did deploys"' in client.prompts[0]


@pytest.mark.parametrize("role", ["", "   ", "\n\t"])
def test_blank_role_scores_zero_without_calling_model(stub_client, role):
    client = stub_client("should not be used")
    scores = asyncio.run(AiService(client).score_candidates_against_role(CANDIDATES, role))

    assert [(s.candidate_id, s.score, s.insight) for s in scores] == [(1, 0, ""), (2, 0, ""), (3, 0, "")]
    assert client.prompts == []


def test_empty_candidate_list_makes_no_call(stub_client):
    client = stub_client("[]")
    assert asyncio.run(AiService(client).score_candidates_against_role([], "role")) == []
    assert client.prompts == []


def test_non_array_completion_ranks_by_input_order(stub_client):
    client = stub_client("I cannot comply.")
    scores = asyncio.run(AiService(client).score_candidates_against_role(CANDIDATES, "Backend role"))
    assert [s.score for s in scores] == [70, 69, 68]
    assert len(client.prompts) == 1


def test_scoring_gateway_error_propagates(stub_client):
    client = stub_client(error=GatewayError("down"))
    with pytest.raises(GatewayError):
        asyncio.run(AiService(client).score_candidates_against_role(CANDIDATES, "role"))


def test_summary_gateway_error_propagates(stub_client):
    client = stub_client(error=GatewayError("down"))
    with pytest.raises(GatewayError):
        asyncio.run(AiService(client).generate_summary(SummaryRequest()))


def test_summary_survives_deeply_nested_completion(stub_client):
    completion = "[" * 1200 + "]" * 1200
    service = AiService(stub_client(completion))
    response = asyncio.run(service.generate_summary(SummaryRequest(title="Engineer")))
    assert response.summary == completion[:600]
