"""Tests for loading vocabulary files and saving results."""
from __future__ import annotations

import pytest

from vocab_quizgen.errors import FileIOError, InputError
from vocab_quizgen.files import read_vocab_file, save_result_text, suggested_filename
from vocab_quizgen.models import QuestionType


class TestReadVocabFile:
    def test_reads_utf8(self, tmp_path):
        f = tmp_path / "words.txt"
        f.write_text("bank = 은행\n", encoding="utf-8")
        assert read_vocab_file(f) == "bank = 은행\n"
        assert read_vocab_file(str(f)) == "bank = 은행\n"

    @pytest.mark.parametrize("path", [None, ""])
    def test_cancel_is_not_an_error(self, path):
        assert read_vocab_file(path) is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileIOError) as exc_info:
            read_vocab_file(tmp_path / "nope.txt")
        assert exc_info.value.message.startswith("파일 읽기 오류")

    def test_not_utf8(self, tmp_path):
        f = tmp_path / "latin.txt"
        f.write_bytes(b"caf\xe9 = coffee\n")
        with pytest.raises(FileIOError):
            read_vocab_file(f)


class TestSaveResultText:
    def test_writes_and_confirms(self, tmp_path):
        target = tmp_path / "out" / "words_빈칸.txt"
        message = save_result_text("1. 문제\n---\n", target)
        assert message == "저장 완료: words_빈칸.txt"
        assert target.read_text(encoding="utf-8") == "1. 문제\n---\n"

    @pytest.mark.parametrize("path", [None, ""])
    def test_cancel_is_not_an_error(self, path):
        assert save_result_text("content", path) is None

    def test_empty_content(self, tmp_path):
        with pytest.raises(InputError):
            save_result_text("", tmp_path / "x.txt")

    def test_write_failure(self, tmp_path):
        # A directory in the way of the target file.
        target = tmp_path / "taken"
        target.mkdir()
        with pytest.raises(FileIOError) as exc_info:
            save_result_text("content", target)
        assert exc_info.value.message.startswith("파일 저장 오류")


class TestSuggestedFilename:
    @pytest.mark.parametrize("source, qtype, expected", [
        ("week1.txt", QuestionType.FILL_BLANK, "week1_빈칸.txt"),
        ("week1", "english-definition-match", "week1_영영.txt"),
        (None, QuestionType.DEFINITION_JUDGMENT, "result_뜻풀이.txt"),
        ("", QuestionType.FILL_BLANK, "result_빈칸.txt"),
    ])
    def test_names(self, source, qtype, expected):
        assert suggested_filename(source, qtype) == expected
