from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from vocab_quizgen.models import QuestionType

log = logging.getLogger("vocab_quizgen.config")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_PATH = PROJECT_ROOT / "config.json"

API_KEY_FIELD = "chatgpt_api_key"

DEFAULTS = {
    "llm_provider": "openai",
    "llm_model": "gpt-5-mini",
    "question_type": QuestionType.FILL_BLANK.value,
    "sentence_count": 3,
    "request_timeout": 300.0,
    "temperature": 1.0,
    "ollama_url": "http://localhost:11434",
    "api_key_file": "api.json",
    "output_dir": "output",
}

COST_WARNING = "GPT-5 pro는 고성능 모델이므로, 비용이 많이 발생할 수 있습니다. 계속하시겠습니까?"
QUALITY_WARNING = "성능이 낮은 모델이므로, 문제 생성 품질이 낮거나 오류가 발생할 수 있습니다. 계속하시겠습니까?"
SENTENCE_COST_WARNING = "예문을 5개 이상 생성하면 API 비용이 증가할 수 있습니다. 계속하시겠습니까?"
MAX_CHEAP_SENTENCES = 5

# (model id, display label, confirmation warning)
MODEL_CHOICES: list[tuple[str, str, str | None]] = [
    ("gpt-5-pro", "GPT-5 pro", COST_WARNING),
    ("gpt-5", "GPT-5", None),
    ("gpt-5-mini", "GPT-5 mini", None),
    ("gpt-5-nano", "GPT-5 nano", QUALITY_WARNING),
    ("gpt-4.1", "GPT-4.1", QUALITY_WARNING),
]


@dataclass
class Settings:
    llm_provider: str = DEFAULTS["llm_provider"]
    llm_model: str = DEFAULTS["llm_model"]
    question_type: str = DEFAULTS["question_type"]
    sentence_count: int = DEFAULTS["sentence_count"]
    request_timeout: float = DEFAULTS["request_timeout"]
    temperature: float = DEFAULTS["temperature"]
    ollama_url: str = DEFAULTS["ollama_url"]
    api_key_file: str = DEFAULTS["api_key_file"]
    output_dir: str = DEFAULTS["output_dir"]

    @property
    def project_root(self) -> Path:
        return PROJECT_ROOT

    @property
    def output_full_path(self) -> Path:
        return self.project_root / self.output_dir

    def api_key_candidates(self) -> list[Path]:
        """Next to the installed project first, then the working directory."""
        return [self.project_root / self.api_key_file, Path.cwd() / self.api_key_file]

    def to_dict(self) -> dict:
        return {
            "llm_provider": self.llm_provider,
            "llm_model": self.llm_model,
            "question_type": self.question_type,
            "sentence_count": self.sentence_count,
            "request_timeout": self.request_timeout,
            "temperature": self.temperature,
            "ollama_url": self.ollama_url,
            "api_key_file": self.api_key_file,
            "output_dir": self.output_dir,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")


def load_api_key(candidates: list[Path]) -> str | None:
    """Read the API key from the first existing candidate file.

    Returns ``None`` when no file exists or it cannot be read/parsed, or
    carries no key.  Never raises: generation is simply unavailable.
    """
    path = next((p for p in candidates if p.exists()), None)
    if path is None:
        log.warning("API key file not found (looked in: %s)", ", ".join(str(p) for p in candidates))
        return None
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        log.warning("Could not read API key file %s: %s", path, e)
        return None
    key = raw.get(API_KEY_FIELD) if isinstance(raw, dict) else None
    if not isinstance(key, str) or not key.strip():
        log.warning("API key file %s has no '%s' value", path, API_KEY_FIELD)
        return None
    return key.strip()


def model_choices(settings: Settings) -> list[tuple[str, str, str | None]]:
    """Models the UI may offer; only OpenAI has a catalogue, others use the configured model."""
    if settings.llm_provider == "openai":
        return list(MODEL_CHOICES)
    return [(settings.llm_model, settings.llm_model, None)]


def resolve_model(settings: Settings, requested: str | None) -> str:
    """The UI catalogue is OpenAI-only; other providers always run the configured model."""
    if settings.llm_provider == "openai" and requested:
        return requested
    return settings.llm_model


def model_warning(model_id: str) -> str | None:
    for mid, _label, warning in MODEL_CHOICES:
        if mid == model_id:
            return warning
    return None


def normalize_sentence_count(value) -> int:
    """Coerce a user-entered sentence count; anything unusable becomes 1."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        return 1
    return max(n, 1)


def sentence_count_warning(question_type: QuestionType | str, sentence_count: int) -> str | None:
    if QuestionType.parse(question_type) is QuestionType.FILL_BLANK and sentence_count > MAX_CHEAP_SENTENCES:
        return SENTENCE_COST_WARNING
    return None
