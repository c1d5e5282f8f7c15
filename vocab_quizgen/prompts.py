"""Prompt templates for quiz generation.

All three question types share one system-prompt skeleton.  A
``QuestionTemplate`` record holds only what differs between types: the task
line, the main rule, the per-question title, and the body rules of the
output structure.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from vocab_quizgen.models import GenerationRequest, QuestionType, VocabPair

SYSTEM_HEADER = "You are an expert English vocabulary test maker for Korean students."

STYLE_RULES = """\
### Word Selection & Question Style Rule
1. PRIORITY: Focus on polysemous words—those with multiple, distinct meanings \
(e.g., different parts of speech like 'conduct' as a noun vs. verb, or different \
senses like 'bank' of a river vs. a financial institution).
2. GOAL: The questions should be intentionally challenging, designed to confuse \
the test-taker and test their ability to discern the correct meaning from context."""

ANSWER_RULES = """\
### Answer Generation Rules
1. CRITICAL: DO NOT mark the correct answer in the choices. Instead, create a \
separate `[정답]` section at the very end of the entire output, listing each \
question number and its correct choice number.
2. CRITICAL: The position of the correct answer MUST be truly and unpredictably \
randomized to ensure a balanced distribution. For the entire set of questions, \
each choice position (①, ②, ③, ④, ⑤) should be the correct answer approximately \
20% of the time. DO NOT use any discernible pattern (e.g., 1, 2, 3, 4, 5 or \
5, 4, 3, 2, 1). The sequence of correct answers must appear random and chaotic."""

FINAL_REVIEW = """\
### Final Review
Before concluding your response, you MUST review the entire generated text one \
last time to ensure every single rule has been followed. Pay special attention \
that every question has exactly 5 numbered choices (① to ⑤). If you find any \
mistake, you must correct it before finishing."""

SEPARATOR_RULE = "Separate each full question block with a '---' line."

USER_PREAMBLE = (
    "Here is the list of vocabulary. Create test questions based on these words, "
    "strictly following all rules defined in the system instructions."
)


@dataclass(frozen=True)
class QuestionTemplate:
    task: str
    main_rule: str
    title: str
    body_rules: tuple[str, ...]


TEMPLATES: dict[QuestionType, QuestionTemplate] = {
    QuestionType.FILL_BLANK: QuestionTemplate(
        task="Your task is to create multiple-choice questions that test understanding of words in context.",
        main_rule="For each WORD and for each of its SENSEs, you must generate a complete question block.",
        title="Add the title: '다음 빈칸에 공통으로 들어갈 말로 가장 적절한 것은?'",
        body_rules=(
            "Provide exactly {sentence_count} distinct English sentences as context. "
            "Each sentence must have the word blanked out as '_______'.",
            "Provide exactly 5 answer choices (①, ②, ③, ④, ⑤).",
            "The choices must include one correct answer (the original WORD) and four "
            "plausible but incorrect distractors.",
        ),
    ),
    QuestionType.DEFINITION_MATCH: QuestionTemplate(
        task="Your task is to create multiple-choice questions based on English definitions.",
        main_rule="For each WORD, you must generate one complete multiple-choice question.",
        title="Add the title: '다음 영어 설명에 해당하는 단어는?'",
        body_rules=(
            "Provide the English definition of the WORD as the question body.",
            "Provide exactly 5 answer choices (①, ②, ③, ④, ⑤): one correct answer "
            "(the original WORD) and four plausible distractors (e.g., synonyms, related words).",
        ),
    ),
    QuestionType.DEFINITION_JUDGMENT: QuestionTemplate(
        task="Your task is to create multiple-choice questions that test the precise definition of a word.",
        main_rule="For each WORD, you must generate one complete multiple-choice question asking for its correct definition.",
        title="Add the title: '다음 단어 <WORD>의 영영풀이로 가장 적절한 것은?' "
              "(replace <WORD> with the actual word).",
        body_rules=(
            "Provide exactly 5 definition choices (①, ②, ③, ④, ⑤): one perfectly "
            "correct definition and four subtly incorrect but plausible definitions.",
        ),
    ),
}


def format_output_structure(template: QuestionTemplate, sentence_count: int) -> str:
    steps = [
        "Start with the question number (e.g., '1.').",
        template.title,
        *(rule.format(sentence_count=sentence_count) for rule in template.body_rules),
        SEPARATOR_RULE,
    ]
    lines = ["### Output Structure (per question)"]
    lines.extend(f"{i}. {step}" for i, step in enumerate(steps, 1))
    return "\n".join(lines)


def build_system_prompt(question_type: QuestionType, sentence_count: int) -> str:
    """Render the system instructions for *question_type*.

    ``sentence_count`` only appears in the fill-in-the-blank body rules; the
    other templates ignore it.
    """
    template = TEMPLATES[QuestionType.parse(question_type)]
    sections = [
        "\n".join([SYSTEM_HEADER, template.task, "Strictly follow all rules below."]),
        f"### Main Rule\n{template.main_rule}",
        STYLE_RULES,
        ANSWER_RULES,
        format_output_structure(template, sentence_count),
        FINAL_REVIEW,
    ]
    return "\n\n".join(sections)


def format_vocab_list(pairs: Sequence[VocabPair]) -> str:
    return "\n".join(pair.render() for pair in pairs)


def build_user_prompt(pairs: Sequence[VocabPair]) -> str:
    return "\n".join([USER_PREAMBLE, "", "[Vocabulary List]", format_vocab_list(pairs)])


def build_prompts(
    pairs: Sequence[VocabPair],
    question_type: QuestionType | str,
    sentence_count: int,
) -> tuple[str, str]:
    """Return ``(system_prompt, user_prompt)``; pure, pairs are rendered in the given order."""
    return build_system_prompt(question_type, sentence_count), build_user_prompt(pairs)


def build_request_prompts(request: GenerationRequest) -> tuple[str, str]:
    return build_prompts(request.pairs, request.question_type, request.sentence_count)
