"""CLI entry point for vocab-quizgen.

Usage:
  python -m vocab_quizgen serve [--port PORT] [--host HOST]
  python -m vocab_quizgen stop
  python -m vocab_quizgen status
  python -m vocab_quizgen parse FILE
  python -m vocab_quizgen prompt FILE [--type TYPE] [--sentences N]
  python -m vocab_quizgen generate FILE [--type TYPE] [--model MODEL] [--sentences N] [--output PATH]
"""
from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys
from pathlib import Path

from vocab_quizgen.errors import QuizGenError

PID_FILE = Path(__file__).resolve().parent.parent / ".server.pid"


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    try:
        if command == "serve":
            _serve(args[1:])
        elif command == "stop":
            _stop()
        elif command == "status":
            _status()
        elif command == "parse":
            _parse(args[1:])
        elif command == "prompt":
            _prompt(args[1:])
        elif command == "generate":
            _generate(args[1:])
        else:
            print(f"Unknown command: {command}")
            print("Commands: serve, stop, status, parse, prompt, generate")
            sys.exit(1)
    except QuizGenError as e:
        print(f"오류: {e.message}", file=sys.stderr)
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _positional(args: list[str]) -> str | None:
    """First argument that is neither a flag nor a flag's value."""
    skip = False
    for a in args:
        if skip:
            skip = False
            continue
        if a.startswith("--"):
            skip = True
            continue
        return a
    return None


def _read_pid() -> int | None:
    """Read PID from file, return None if stale or missing."""
    if not PID_FILE.exists():
        return None
    try:
        pid = int(PID_FILE.read_text().strip())
        os.kill(pid, 0)
        return pid
    except (ValueError, ProcessLookupError, PermissionError):
        PID_FILE.unlink(missing_ok=True)
        return None


def _stop() -> bool:
    """Stop a running server. Returns True if a server was stopped."""
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
        return False
    try:
        os.kill(pid, signal.SIGTERM)
        print(f"Stopped server (PID {pid}).")
        PID_FILE.unlink(missing_ok=True)
        return True
    except ProcessLookupError:
        print("Server was not running (stale PID file removed).")
        PID_FILE.unlink(missing_ok=True)
        return False


def _status():
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
    else:
        print(f"Server is running (PID {pid}).")


def _serve(args: list[str]):
    import uvicorn

    existing = _read_pid()
    if existing is not None:
        print(f"Server already running (PID {existing}). Use 'stop' first.")
        sys.exit(1)

    port = int(_parse_flag(args, "--port", "8766"))
    host = _parse_flag(args, "--host", "127.0.0.1")
    PID_FILE.write_text(str(os.getpid()))

    print(f"Starting Vocab Quiz Generator on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    try:
        uvicorn.run(
            "vocab_quizgen.app:app",
            host=host,
            port=port,
            reload=False,
            timeout_graceful_shutdown=5,
        )
    finally:
        PID_FILE.unlink(missing_ok=True)


def _require_vocab_text(args: list[str]) -> tuple[Path, str]:
    from vocab_quizgen.files import read_vocab_file

    path = _positional(args)
    if path is None:
        print("Missing vocabulary FILE argument.")
        sys.exit(1)
    return Path(path), read_vocab_file(path)


def _parse(args: list[str]):
    from vocab_quizgen.parsers.vocabulary_parser import parse_vocab_text

    path, text = _require_vocab_text(args)
    result = parse_vocab_text(text)
    for pair in result.pairs:
        print(pair.render())
    print(f"\n{len(result.pairs)} entries from {path.name}")
    if result.skipped_lines:
        print(f"Skipped lines: {', '.join(map(str, result.skipped_lines))}")


def _prompt(args: list[str]):
    from vocab_quizgen.config import load_settings, normalize_sentence_count
    from vocab_quizgen.prompts import build_request_prompts
    from vocab_quizgen.question_generator import prepare_request

    settings = load_settings()
    _, text = _require_vocab_text(args)
    request = prepare_request(
        text,
        settings.llm_model,
        _parse_flag(args, "--type", settings.question_type),
        normalize_sentence_count(_parse_flag(args, "--sentences", str(settings.sentence_count))),
    )
    system_prompt, user_prompt = build_request_prompts(request)
    print("── SYSTEM ──")
    print(system_prompt)
    print("\n── USER ──")
    print(user_prompt)


def _generate(args: list[str]):
    logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

    from vocab_quizgen.config import (
        load_api_key,
        load_settings,
        model_warning,
        normalize_sentence_count,
        sentence_count_warning,
    )
    from vocab_quizgen.files import save_result_text, suggested_filename
    from vocab_quizgen.models import QuestionType
    from vocab_quizgen.providers.factory import create_provider
    from vocab_quizgen.question_generator import generate_questions

    settings = load_settings()
    path, text = _require_vocab_text(args)
    model = _parse_flag(args, "--model", settings.llm_model)
    question_type = QuestionType.parse(_parse_flag(args, "--type", settings.question_type))
    sentence_count = normalize_sentence_count(
        _parse_flag(args, "--sentences", str(settings.sentence_count)))

    for warning in (model_warning(model), sentence_count_warning(question_type, sentence_count)):
        if warning:
            print(f"경고: {warning}")

    llm = create_provider(settings, load_api_key(settings.api_key_candidates()))
    print(f"Generating {question_type.label} questions using {llm.name()}...")
    result = asyncio.run(generate_questions(
        llm, text, model, question_type, sentence_count,
        temperature=settings.temperature,
    ))

    output = _parse_flag(args, "--output", "")
    if not output:
        output = str(settings.output_full_path / suggested_filename(path.name, question_type))
    print(result)
    print()
    print(save_result_text(result, output))


if __name__ == "__main__":
    main()
