"""Parse a plain-text vocabulary block into VocabPair objects.

One entry per line:
  word = meaning1; meaning2, meaning3

The line is split at the FIRST ``=``; any later ``=`` stays in the meanings.
Meanings are separated by ``;`` or ``,`` interchangeably.  Lines without
``=``, without a word, or without any non-blank meaning are skipped silently.
"""
from __future__ import annotations

import re
from pathlib import Path

from vocab_quizgen.models import ParseResult, VocabPair

SENSE_SEPARATOR = re.compile(r"[;,]")


def parse_vocab_line(line: str) -> VocabPair | None:
    line = line.strip()
    if not line:
        return None
    word, sep, meanings = line.partition("=")
    if not sep:
        return None
    word = word.strip()
    senses = [s.strip() for s in SENSE_SEPARATOR.split(meanings.strip())]
    senses = [s for s in senses if s]
    if not word or not senses:
        return None
    return VocabPair(word=word, senses=senses)


def parse_vocab_text(text: str) -> ParseResult:
    """Parse *text* and record the 1-based numbers of dropped non-blank lines."""
    result = ParseResult()
    for lineno, raw in enumerate(text.split("\n"), 1):
        if not raw.strip():
            continue
        pair = parse_vocab_line(raw)
        if pair is None:
            result.skipped_lines.append(lineno)
        else:
            result.pairs.append(pair)
    return result


def parse_vocab_block(text: str) -> list[VocabPair]:
    return parse_vocab_text(text).pairs


def parse_vocab_file(path: Path) -> ParseResult:
    return parse_vocab_text(path.read_text(encoding="utf-8"))
