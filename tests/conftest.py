"""Shared fixtures: fake Ollama servers and seeded candidate stores."""

import json
from datetime import datetime, timezone
from typing import Callable

import httpx
import pytest

from talentmatch.core.config.settings import GatewaySettings
from talentmatch.core.models.candidate import CandidateRecord
from talentmatch.core.models.enums import Visibility
from talentmatch.core.storage.candidate_store import CandidateStore
from talentmatch.integrations.ollama_client import OllamaClient


class StubClient:
    """Stands in for OllamaClient: canned completions, recorded prompts."""

    def __init__(self, completion: str = "", error: Exception | None = None):
        self.completion = completion
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str, model: str | None = None) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.completion


def ollama_reply(text: str) -> Callable[[httpx.Request], httpx.Response]:
    """MockTransport handler answering every generate call with ``text``."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"model": "test", "response": text, "done": True})

    return handler


def make_ollama_client(handler: Callable[[httpx.Request], httpx.Response]) -> OllamaClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    settings = GatewaySettings(base_url="http://ollama.test", model="test-model")
    return OllamaClient(settings, http_client=http_client)


def make_record(candidate_id: int, **overrides) -> CandidateRecord:
    data = {
        "id": candidate_id,
        "name": f"Candidate {candidate_id}",
        "title": "Software Engineer",
        "experience_years": "3-5",
        "location": "Berlin",
        "skills_json": json.dumps(["Python", "SQL"]),
        "experience_json": json.dumps(
            [
                {
                    "title": "Engineer",
                    "company": "Acme",
                    "startDate": "2020",
                    "endDate": "2023",
                    "bullets": ["Built APIs", "Cut latency 30%", "Mentored juniors"],
                }
            ]
        ),
        "education_json": json.dumps([{"school": "TU Berlin", "degree": "BSc"}]),
        "summary": "Backend engineer.",
        "resume_text": "Python SQL backend APIs",
        "visibility": Visibility.PUBLIC,
        "profile_completed_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return CandidateRecord(**data)


@pytest.fixture
def store(tmp_path) -> CandidateStore:
    store = CandidateStore(tmp_path / "store")
    for candidate_id in (1, 2, 3):
        store.save(make_record(candidate_id))
    return store


@pytest.fixture
def stub_client() -> type[StubClient]:
    return StubClient


@pytest.fixture
def record_factory() -> Callable[..., CandidateRecord]:
    return make_record


@pytest.fixture
def ollama_factory() -> Callable[..., OllamaClient]:
    return make_ollama_client


@pytest.fixture
def reply() -> Callable[[str], Callable[[httpx.Request], httpx.Response]]:
    return ollama_reply
