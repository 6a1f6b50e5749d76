"""
Quiz Generator.

Builds multiple-choice and true/false questions from study items.

- Each scoped item is visited once, in random order
- 60% of visits try multiple choice, 40% true/false; a failed attempt skips
  the item rather than retrying with the other type
- Distractors are descriptions of other corpus items
- Items whose only description is their own term are never asked about

Insufficient input is signalled by returning fewer questions, never by
raising.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from loguru import logger

from src.core.models import QuestionType, QuizQuestion, StudyItem, has_content
from src.core.shuffle import shuffle

MULTIPLE_CHOICE_RATIO = 0.6
MCQ_DISTRACTORS = 3


def describe(item: StudyItem) -> str:
    """
    Pick the text that explains an item.

    Prefers what_it_is, then definition, skipping sentinel text and text that
    merely repeats the term. Falls back to the term itself, which marks the
    item as unusable for questions.
    """
    if has_content(item.what_it_is) and item.what_it_is != item.term:
        return item.what_it_is
    if has_content(item.definition) and item.definition != item.term:
        return item.definition
    return item.term


def is_askable(item: StudyItem) -> bool:
    """True when the item has a description other than its own term."""
    return describe(item) != item.term


def pick_distractors(
    correct: StudyItem,
    pool: Sequence[StudyItem],
    count: int,
    rng: random.Random | None = None,
) -> list[StudyItem]:
    """
    Sample up to count other items usable as wrong answers.

    Eligible items have a real what_it_is that differs from their term and
    from the correct item's description. No two picks share a description,
    so options never repeat and a false statement is never accidentally true.
    """
    correct_text = describe(correct)
    candidates = [
        item
        for item in pool
        if item.id != correct.id
        and has_content(item.what_it_is)
        and item.what_it_is != item.term
        and describe(item) != correct_text
    ]

    picked: list[StudyItem] = []
    seen: set[str] = set()
    for item in shuffle(candidates, rng):
        if len(picked) >= count:
            break
        text = describe(item)
        if text in seen:
            continue
        seen.add(text)
        picked.append(item)
    return picked


def _as_sentence(text: str) -> str:
    return text if text.lower().endswith(".") else f"{text}."


def generate_multiple_choice(
    item: StudyItem,
    all_items: Sequence[StudyItem],
    rng: random.Random | None = None,
) -> QuizQuestion | None:
    """Four-option question asking what the item is, or None."""
    description = describe(item)
    if description == item.term:
        return None

    distractors = pick_distractors(item, all_items, MCQ_DISTRACTORS, rng)
    if len(distractors) < MCQ_DISTRACTORS:
        return None

    options = [(description, True)] + [(describe(d), False) for d in distractors]
    options = shuffle(options, rng)
    correct_index = next(i for i, (_, is_correct) in enumerate(options) if is_correct)

    return QuizQuestion(
        id=f"mc-{item.id}",
        type=QuestionType.MULTIPLE_CHOICE,
        question=f'What is "{item.term}"?',
        options=[text for text, _ in options],
        correct_answer=correct_index,
        explanation=description,
        item_id=item.id,
    )


def generate_true_false(
    item: StudyItem,
    all_items: Sequence[StudyItem],
    rng: random.Random | None = None,
) -> QuizQuestion | None:
    """
    True/false statement about the item, or None.

    A coin flip picks the polarity. The false form pairs the term with another
    item's description; without an eligible distractor it fails instead of
    falling back to the true form.
    """
    source = rng or random
    description = describe(item)
    if description == item.term:
        return None

    if source.random() > 0.5:
        return QuizQuestion(
            id=f"tf-{item.id}",
            type=QuestionType.TRUE_FALSE,
            question=f'True or False: "{item.term}" is {_as_sentence(description)}',
            correct_answer=True,
            explanation=f"Correct! {item.term} is {description}.",
            item_id=item.id,
        )

    distractors = pick_distractors(item, all_items, 1, rng)
    if not distractors:
        return None
    wrong = describe(distractors[0])

    return QuizQuestion(
        id=f"tf-{item.id}",
        type=QuestionType.TRUE_FALSE,
        question=f'True or False: "{item.term}" is {_as_sentence(wrong)}',
        correct_answer=False,
        explanation=f"False. {item.term} is actually {description}.",
        item_id=item.id,
    )


def generate_quiz(
    items: Sequence[StudyItem],
    all_items: Sequence[StudyItem],
    count: int = 10,
    rng: random.Random | None = None,
) -> list[QuizQuestion]:
    """
    Generate up to count questions about items.

    Args:
        items: Items to ask about (usually one module)
        all_items: Full corpus, used as the distractor pool
        count: Maximum number of questions
        rng: Optional random source

    Returns:
        Questions in random order; may be shorter than count
    """
    source = rng or random
    questions: list[QuizQuestion] = []
    skipped = 0

    for item in shuffle(items, rng):
        if len(questions) >= count:
            break

        if source.random() < MULTIPLE_CHOICE_RATIO:
            question = generate_multiple_choice(item, all_items, rng)
        else:
            question = generate_true_false(item, all_items, rng)

        if question is None:
            skipped += 1
            continue
        questions.append(question)

    logger.debug(f"Generated {len(questions)}/{count} quiz questions ({skipped} items skipped)")
    return shuffle(questions, rng)
