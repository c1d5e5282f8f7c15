"""Turn a vocabulary block into quiz text with a single LLM call."""
from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from vocab_quizgen.errors import InputError
from vocab_quizgen.models import GenerationRequest, QuestionType, VocabPair
from vocab_quizgen.parsers.vocabulary_parser import parse_vocab_text
from vocab_quizgen.prompts import build_request_prompts

if TYPE_CHECKING:
    from vocab_quizgen.providers.base import LLMProvider

_log = logging.getLogger("vocab_quizgen.qgen")

NO_ENTRIES_MESSAGE = "입력에서 유효한 'word = 뜻' 형식을 찾을 수 없습니다."


def shuffle_pairs(pairs: Sequence[VocabPair], rng: random.Random | None = None) -> list[VocabPair]:
    """Return a uniformly shuffled copy of *pairs*.

    Without *rng* an OS-entropy generator is used, so every call orders the
    entries differently.  Pass a seeded ``random.Random`` for reproducible
    orderings in tests.
    """
    rng = rng or random.SystemRandom()
    shuffled = list(pairs)
    rng.shuffle(shuffled)
    return shuffled


def prepare_request(
    vocab_text: str,
    model: str,
    question_type: QuestionType | str,
    sentence_count: int,
    rng: random.Random | None = None,
) -> GenerationRequest:
    """Parse, validate and shuffle; raises ``InputError`` when nothing parses."""
    qtype = QuestionType.parse(question_type)
    parsed = parse_vocab_text(vocab_text)
    if not parsed.pairs:
        raise InputError(NO_ENTRIES_MESSAGE)
    if parsed.skipped_lines:
        _log.info("Skipped %d malformed line(s): %s", len(parsed.skipped_lines),
                  ", ".join(map(str, parsed.skipped_lines)))
    return GenerationRequest(
        pairs=tuple(shuffle_pairs(parsed.pairs, rng)),
        question_type=qtype,
        sentence_count=sentence_count,
        model=model,
    )


async def generate_questions(
    llm: LLMProvider,
    vocab_text: str,
    model: str,
    question_type: QuestionType | str,
    sentence_count: int,
    rng: random.Random | None = None,
    temperature: float = 1.0,
) -> str:
    """Generate quiz text for *vocab_text*; the model output is returned verbatim.

    Exactly one request is made.  Failures propagate as ``QuizGenError``
    subclasses and are never retried here.
    """
    request = prepare_request(vocab_text, model, question_type, sentence_count, rng)
    system_prompt, user_prompt = build_request_prompts(request)
    _log.info("Generate %s for %d words with %s (%s)",
              request.question_type.value, len(request.pairs), model, llm.name())
    return await llm.generate(user_prompt, system=system_prompt, model=model, temperature=temperature)
