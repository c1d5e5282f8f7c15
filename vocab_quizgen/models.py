from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from vocab_quizgen.errors import InputError


class QuestionType(str, Enum):
    FILL_BLANK = "fill-in-the-blank"
    DEFINITION_MATCH = "english-definition-match"
    DEFINITION_JUDGMENT = "definition-judgment"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def short_tag(self) -> str:
        return _SHORT_TAGS[self]

    @classmethod
    def parse(cls, value: str | QuestionType) -> QuestionType:
        """Accept an enum value, a member name, or the Korean UI label."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for qtype in cls:
            if text in (qtype.value, qtype.name, qtype.label):
                return qtype
        raise InputError(f"알 수 없는 문제 유형입니다: {value!r}")


_LABELS = {
    QuestionType.FILL_BLANK: "빈칸 추론",
    QuestionType.DEFINITION_MATCH: "영영풀이",
    QuestionType.DEFINITION_JUDGMENT: "뜻풀이 판단",
}

_SHORT_TAGS = {
    QuestionType.FILL_BLANK: "빈칸",
    QuestionType.DEFINITION_MATCH: "영영",
    QuestionType.DEFINITION_JUDGMENT: "뜻풀이",
}


@dataclass
class VocabPair:
    word: str
    senses: list[str]

    def render(self) -> str:
        return f"{self.word} = {', '.join(self.senses)}"


@dataclass
class ParseResult:
    pairs: list[VocabPair] = field(default_factory=list)
    skipped_lines: list[int] = field(default_factory=list)  # 1-based


@dataclass(frozen=True)
class GenerationRequest:
    pairs: tuple[VocabPair, ...]
    question_type: QuestionType
    sentence_count: int
    model: str
