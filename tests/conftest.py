"""
Pytest configuration and shared fixtures
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from slidecraft.schemas.deck import Deck


SAMPLE_DECK = {
    "title": "Quarterly Review",
    "slides": [
        {"title": "Overview", "bullets": ["Revenue grew 12%", "Two new markets"]},
        {"title": "Risks", "bullets": ["Supply chain delays"]},
        {"title": "Next Steps", "bullets": ["Hire a regional lead", "Ship v2 in May"]},
    ],
}


@pytest.fixture
def sample_deck() -> Deck:
    return Deck.model_validate(SAMPLE_DECK)


@pytest.fixture
def fake_generate(sample_deck):
    """Stands in for the generation client and records its calls."""
    return AsyncMock(return_value=sample_deck)


def make_completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def openai_client():
    """AsyncOpenAI look-alike whose chat.completions.create returns SAMPLE_DECK."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion(json.dumps(SAMPLE_DECK)))
    return client


@pytest.fixture
def client(monkeypatch, fake_generate):
    from slidecraft.main import app
    from slidecraft.sessions import registry

    registry.clear()
    monkeypatch.setattr("slidecraft.services.session.generate_presentation", fake_generate)
    with TestClient(app) as c:
        yield c
    registry.clear()
