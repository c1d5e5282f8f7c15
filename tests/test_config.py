"""Tests for configuration and API key loading."""
from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from vocab_quizgen.config import (
    COST_WARNING,
    QUALITY_WARNING,
    SENTENCE_COST_WARNING,
    Settings,
    load_api_key,
    load_settings,
    model_choices,
    model_warning,
    normalize_sentence_count,
    resolve_model,
    save_settings,
    sentence_count_warning,
)
from vocab_quizgen.models import QuestionType


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.llm_provider == "openai"
        assert s.request_timeout == 300.0
        assert s.question_type == "fill-in-the-blank"
        assert s.sentence_count == 3

    def test_to_dict(self):
        d = Settings().to_dict()
        assert d["llm_provider"] == "openai"
        assert len(d) == 9  # all fields present

    def test_to_dict_roundtrip(self):
        s = Settings(llm_model="gpt-5", sentence_count=5)
        s2 = Settings(**s.to_dict())
        assert s2.llm_model == "gpt-5"
        assert s2.sentence_count == 5

    def test_api_key_candidates(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        candidates = Settings(api_key_file="key.json").api_key_candidates()
        assert candidates[0].name == "key.json"
        assert candidates[1] == tmp_path / "key.json"


class TestLoadSaveSettings:
    def test_load_from_file(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"llm_model": "gpt-5", "sentence_count": 4}))

        with patch("vocab_quizgen.config.CONFIG_PATH", config_path):
            s = load_settings()
        assert s.llm_model == "gpt-5"
        assert s.sentence_count == 4
        assert s.llm_provider == "openai"

    def test_load_missing_file(self, tmp_path):
        with patch("vocab_quizgen.config.CONFIG_PATH", tmp_path / "nonexistent.json"):
            s = load_settings()
        assert s.llm_model == "gpt-5-mini"

    def test_save_creates_file(self, tmp_path):
        config_path = tmp_path / "config.json"
        with patch("vocab_quizgen.config.CONFIG_PATH", config_path):
            save_settings(Settings(llm_provider="ollama"))
        assert json.loads(config_path.read_text())["llm_provider"] == "ollama"

    def test_unknown_keys_ignored(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"llm_model": "gpt-5", "unknown_key": "value"}))
        with patch("vocab_quizgen.config.CONFIG_PATH", config_path):
            s = load_settings()
        assert not hasattr(s, "unknown_key")


class TestLoadApiKey:
    def test_reads_key(self, tmp_path):
        f = tmp_path / "api.json"
        f.write_text(json.dumps({"chatgpt_api_key": " sk-test "}))
        assert load_api_key([f]) == "sk-test"

    def test_first_existing_candidate_wins(self, tmp_path):
        second = tmp_path / "b.json"
        second.write_text(json.dumps({"chatgpt_api_key": "sk-second"}))
        assert load_api_key([tmp_path / "missing.json", second]) == "sk-second"

    def test_missing_file(self, tmp_path):
        assert load_api_key([tmp_path / "api.json"]) is None

    @pytest.mark.parametrize("content", [
        "not json",
        "[]",
        json.dumps({"other_key": "x"}),
        json.dumps({"chatgpt_api_key": ""}),
        json.dumps({"chatgpt_api_key": 42}),
    ])
    def test_unusable_file(self, tmp_path, content):
        f = tmp_path / "api.json"
        f.write_text(content)
        assert load_api_key([f]) is None


class TestCallerPolicies:
    def test_model_warnings(self):
        assert model_warning("gpt-5-pro") == COST_WARNING
        assert model_warning("gpt-5-nano") == QUALITY_WARNING
        assert model_warning("gpt-4.1") == QUALITY_WARNING
        assert model_warning("gpt-5") is None
        assert model_warning("something-else") is None

    def test_model_choices_follow_provider(self):
        assert [m[0] for m in model_choices(Settings())][:2] == ["gpt-5-pro", "gpt-5"]
        assert model_choices(Settings(llm_provider="anthropic", llm_model="claude-x")) == [
            ("claude-x", "claude-x", None)
        ]

    def test_resolve_model(self):
        assert resolve_model(Settings(), "gpt-5") == "gpt-5"
        assert resolve_model(Settings(llm_model="gpt-5-mini"), None) == "gpt-5-mini"
        ollama = Settings(llm_provider="ollama", llm_model="llama3")
        assert resolve_model(ollama, "gpt-5-mini") == "llama3"
        assert resolve_model(ollama, None) == "llama3"

    @pytest.mark.parametrize("raw, expected", [
        (3, 3), ("7", 7), (0, 1), (-4, 1), ("abc", 1), (None, 1),
    ])
    def test_normalize_sentence_count(self, raw, expected):
        assert normalize_sentence_count(raw) == expected

    def test_sentence_count_warning(self):
        assert sentence_count_warning(QuestionType.FILL_BLANK, 5) is None
        assert sentence_count_warning(QuestionType.FILL_BLANK, 6) == SENTENCE_COST_WARNING
        assert sentence_count_warning("영영풀이", 10) is None
