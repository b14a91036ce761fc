"""End-to-end compare/insight with a file-backed store and a mocked Ollama server."""

import asyncio
import json

import httpx
import pytest

from talentmatch.ai.service import AiService
from talentmatch.candidates.service import CandidateNotFoundError, CandidatesService
from talentmatch.core.models.enums import Visibility


def test_compare_ranks_candidates_from_model(store, ollama_factory):
    prompts = []

    def handler(request: httpx.Request) -> httpx.Response:
        prompts.append(json.loads(request.content)["prompt"])
        completion = (
            "Here are the scores:\n"
            '[{"candidateId": 1, "score": 50, "insight": "Decent."},'
            ' {"candidateId": 2, "score": 80, "insight": "Strong."},'
            ' {"candidateId": 3, "score": 50, "insight": "Decent too."}]'
        )
        return httpx.Response(200, json={"response": completion})

    service = CandidatesService(store, AiService(ollama_factory(handler)))
    results = asyncio.run(service.compare_candidates("Backend Python engineer", [1, 2, 3]))

    assert [(r.id, r.match_score) for r in results] == [(2, 80), (1, 50), (3, 50)]
    assert results[0].ai_insight == "Strong."
    assert results[0].highlights == ["Built APIs", "Cut latency 30%"]
    assert len(prompts) == 1
    assert "Engineer at Acme (2020 – 2023): Built APIs; Cut latency 30%; Mentored juniors" in prompts[0]


def test_compare_survives_model_outage(store, ollama_factory):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    service = CandidatesService(store, AiService(ollama_factory(handler)))
    results = asyncio.run(service.compare_candidates("Backend Python engineer", [3, 1]))

    assert [r.id for r in results] == [3, 1]
    assert all(r.match_score == 0 and r.ai_insight == "" for r in results)


def test_compare_blank_role_skips_model(store, ollama_factory):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"response": "[]"})

    service = CandidatesService(store, AiService(ollama_factory(handler)))
    results = asyncio.run(service.compare_candidates("   ", [1, 2]))

    assert [(r.id, r.match_score, r.ai_insight) for r in results] == [(1, 0, ""), (2, 0, "")]
    assert calls == []


def test_compare_ignores_unknown_and_invalid_ids(store, ollama_factory, reply):
    service = CandidatesService(store, AiService(ollama_factory(reply("not json at all"))))
    results = asyncio.run(service.compare_candidates("role", [2, "x", 99, 1.5, 1]))

    # Non-array completion: synthetic ranking in input order
    assert [(r.id, r.match_score) for r in results] == [(2, 70), (1, 69)]


def test_insight_for_candidate(store, ollama_factory, reply):
    completion = 'Sure:\n[{"candidateId": 2, "score": 64, "insight": "Good SQL depth."}]'
    service = CandidatesService(store, AiService(ollama_factory(reply(completion))))

    result = asyncio.run(service.get_insight_for_candidate(2, "Data engineer"))
    assert result.match_score == 64
    assert result.insight == "Good SQL depth."


def test_insight_for_unknown_candidate(store, ollama_factory, reply):
    service = CandidatesService(store, AiService(ollama_factory(reply("[]"))))
    result = asyncio.run(service.get_insight_for_candidate(404, "role"))
    assert (result.insight, result.match_score) == ("", 0)


def test_insight_when_model_times_out(store, ollama_factory):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    service = CandidatesService(store, AiService(ollama_factory(handler)))
    result = asyncio.run(service.get_insight_for_candidate(1, "role"))
    assert (result.insight, result.match_score) == ("Unable to generate insight.", 0)


def test_public_profile_lookup(store, record_factory, ollama_factory, reply):
    store.save(record_factory(9, visibility=Visibility.PRIVATE))
    service = CandidatesService(store, AiService(ollama_factory(reply(""))))

    assert service.get_public_candidate(1).name == "Candidate 1"
    with pytest.raises(CandidateNotFoundError):
        service.get_public_candidate(9)
    with pytest.raises(CandidateNotFoundError):
        service.get_public_candidate(404)


def test_search_and_find_all(store, record_factory, ollama_factory, reply):
    store.save(record_factory(4, resume_text="Kotlin Android", location="Munich"))
    service = CandidatesService(store, AiService(ollama_factory(reply(""))))

    assert [r.id for r in service.search("kotlin")] == [4]
    assert [r.id for r in service.search("", location="munich")] == [4]
    assert [r.id for r in service.find_all()] == [1, 2, 3, 4]
