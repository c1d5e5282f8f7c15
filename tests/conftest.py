"""Shared test fixtures."""
from __future__ import annotations

import pytest

from vocab_quizgen.models import VocabPair


class FakeLLM:
    """Fake provider that records calls instead of hitting the network."""

    def __init__(self, response: str = "1. 문제\n---\n[정답]\n1. ③", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, prompt, system=None, model=None, temperature=1.0):
        self.calls.append({
            "prompt": prompt,
            "system": system,
            "model": model,
            "temperature": temperature,
        })
        if self.error is not None:
            raise self.error
        return self.response

    def name(self) -> str:
        return "fake-llm"


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def vocab_text():
    return """\
bank = financial institution, side of a river
conduct = behavior; to lead
"""


@pytest.fixture
def messy_vocab_text():
    """Valid entries mixed with every kind of line the parser drops."""
    return """\
bank = financial institution, side of a river

no equals sign here
conduct = behavior; to lead
empty =
   = orphan meaning
sep = ; , ;
equation = a=b=c, identity
   fox   =  quick ; clever,  sly  
bank = a place to sit
"""


@pytest.fixture
def sample_pairs():
    return [
        VocabPair("bank", ["financial institution", "side of a river"]),
        VocabPair("conduct", ["behavior", "to lead"]),
        VocabPair("fair", ["just", "light-colored", "festival"]),
        VocabPair("bear", ["animal", "to endure"]),
        VocabPair("spring", ["season", "coil", "source of water"]),
    ]
