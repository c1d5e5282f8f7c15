"""FastAPI application with all routes."""
from __future__ import annotations

import logging
import time
from pathlib import Path

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse

from vocab_quizgen.config import (
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
from vocab_quizgen.errors import (
    ConfigurationError,
    EmptyResponseError,
    FileIOError,
    InputError,
    QuizGenError,
    TransportError,
)
from vocab_quizgen.files import save_result_text, suggested_filename
from vocab_quizgen.models import QuestionType
from vocab_quizgen.parsers.vocabulary_parser import parse_vocab_text
from vocab_quizgen.providers.factory import create_provider
from vocab_quizgen.question_generator import generate_questions

app = FastAPI(title="Vocab Quiz Generator")

log = logging.getLogger("vocab_quizgen.app")

# Global state (initialized in startup)
_settings: Settings | None = None
_api_key: str | None = None
_generating = False

STATUS_CODES = {
    InputError: 400,
    ConfigurationError: 503,
    TransportError: 502,
    EmptyResponseError: 502,
    FileIOError: 500,
}


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def _get_llm():
    return create_provider(get_settings(), _api_key)


@app.on_event("startup")
async def startup():
    global _settings, _api_key
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    _api_key = load_api_key(_settings.api_key_candidates())
    if _api_key is None and _settings.llm_provider == "openai":
        log.error("API 키를 찾을 수 없습니다. %s 파일을 확인하세요.", _settings.api_key_file)


@app.exception_handler(QuizGenError)
async def quizgen_error_handler(request: Request, exc: QuizGenError):
    status = next((code for cls, code in STATUS_CODES.items() if isinstance(exc, cls)), 500)
    log.warning("%s failed (%s): %s", request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=status, content={"error": exc.kind, "detail": exc.message})


# ── Static files ──────────────────────────────────────────────────────────

static_dir = Path(__file__).parent / "static"


@app.get("/")
async def index():
    return FileResponse(static_dir / "index.html")


@app.get("/style.css")
async def style():
    return FileResponse(static_dir / "style.css", media_type="text/css")


@app.get("/app.js")
async def script():
    return FileResponse(static_dir / "app.js", media_type="application/javascript")


# ── API: Options ──────────────────────────────────────────────────────────

@app.get("/api/options")
async def api_options():
    s = get_settings()
    return {
        "question_types": [{"value": q.value, "label": q.label} for q in QuestionType],
        "models": [{"id": mid, "label": label, "warning": warning}
                   for mid, label, warning in model_choices(s)],
        "defaults": {
            "model": s.llm_model,
            "question_type": s.question_type,
            "sentence_count": s.sentence_count,
        },
        "api_key_loaded": _api_key is not None,
    }


# ── API: Vocabulary input ─────────────────────────────────────────────────

@app.post("/api/parse")
async def api_parse(request: Request):
    body = await request.json()
    result = parse_vocab_text(body.get("vocab_text") or "")
    return {
        "pairs": [{"word": p.word, "senses": p.senses} for p in result.pairs],
        "skipped_lines": result.skipped_lines,
    }


# ── API: Generate ─────────────────────────────────────────────────────────

@app.post("/api/generate")
async def api_generate(request: Request):
    global _generating
    body = await request.json()
    vocab_text = body.get("vocab_text") or ""
    if not vocab_text.strip():
        raise InputError("먼저 TXT 파일을 불러오세요.")

    s = get_settings()
    model = resolve_model(s, body.get("model"))
    question_type = QuestionType.parse(body.get("question_type") or s.question_type)
    sentence_count = normalize_sentence_count(body.get("sentence_count", s.sentence_count))
    warnings = [w for w in (model_warning(model),
                            sentence_count_warning(question_type, sentence_count)) if w]

    if _generating:
        raise HTTPException(409, "Generation already in progress")
    _generating = True
    try:
        llm = _get_llm()
        t0 = time.monotonic()
        result = await generate_questions(
            llm, vocab_text, model, question_type, sentence_count,
            temperature=s.temperature,
        )
    finally:
        _generating = False

    return {
        "result": result,
        "elapsed": round(time.monotonic() - t0, 1),
        "warnings": warnings,
        "suggested_filename": suggested_filename(body.get("source_name"), question_type),
    }


# ── API: Save ─────────────────────────────────────────────────────────────

@app.post("/api/save")
async def api_save(request: Request):
    body = await request.json()
    filename = (body.get("filename") or "").strip()
    if not filename:
        return {"cancelled": True}
    # Only the basename is honoured; results always land in the output dir.
    target = get_settings().output_full_path / Path(filename).name
    message = save_result_text(body.get("content") or "", target)
    return {"message": message, "path": str(target)}


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await request.json()
    s = get_settings()
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    for k, v in body.items():
        if k in known:
            setattr(s, k, v)
    save_settings(s)
    return s.to_dict()
