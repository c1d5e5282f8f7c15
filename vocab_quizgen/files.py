"""Reading vocabulary files and writing generated quizzes.

An empty or missing path means the user cancelled the file pick; both
functions then return ``None`` without raising.
"""
from __future__ import annotations

from pathlib import Path

from vocab_quizgen.errors import FileIOError, InputError
from vocab_quizgen.models import QuestionType


def read_vocab_file(path: str | Path | None) -> str | None:
    if not path:
        return None
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(f"파일 읽기 오류: {e}") from e


def save_result_text(text: str, path: str | Path | None) -> str | None:
    """Write *text* to *path* and return a confirmation message."""
    if not path:
        return None
    if not text:
        raise InputError("저장할 내용이 없습니다.")
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileIOError(f"파일 저장 오류: {e}") from e
    return f"저장 완료: {target.name}"


def suggested_filename(source_name: str | None, question_type: QuestionType | str) -> str:
    stem = Path(source_name).stem if source_name else ""
    return f"{stem or 'result'}_{QuestionType.parse(question_type).short_tag}.txt"
