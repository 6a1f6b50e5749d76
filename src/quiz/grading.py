"""
Answer checking for generated quiz questions.

Multiple-choice answers are zero-based option indices; true/false answers are
booleans. Anything else counts as a wrong answer.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from src.core.models import ItemResult, QuestionType, QuizQuestion
from src.progress.engine import score_percent


@dataclass
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    feedback: str
    user_answer: str
    correct_answer: str
    explanation: str | None = None


@dataclass
class QuizOutcome:
    """A finished quiz, ready for record_quiz_result."""

    correct: int
    total: int
    item_results: list[ItemResult] = field(default_factory=list)

    @property
    def score(self) -> int:
        return score_percent(self.correct, self.total)


def quiz_id_for_module(module_id: str) -> str:
    """Stable quiz id used for high scores of a module's quiz."""
    return f"quiz-{module_id}"


def _answer_text(question: QuizQuestion, answer: Any) -> str:
    if question.type is QuestionType.TRUE_FALSE:
        return str(answer) if isinstance(answer, bool) else ""
    if isinstance(answer, int) and not isinstance(answer, bool) and question.options:
        if 0 <= answer < len(question.options):
            return question.options[answer]
    return ""


def _correct_text(question: QuizQuestion) -> str:
    if question.type is QuestionType.TRUE_FALSE:
        return str(question.correct_answer)
    return question.options[question.correct_answer] if question.options else ""


def check_answer(question: QuizQuestion, answer: Any) -> AnswerResult:
    """
    Check a single answer.

    Args:
        question: The generated question
        answer: Option index (multiple choice) or bool (true/false)

    Returns:
        AnswerResult with feedback and the question's explanation
    """
    if question.type is QuestionType.TRUE_FALSE:
        is_correct = isinstance(answer, bool) and answer is question.correct_answer
    else:
        is_correct = (
            isinstance(answer, int)
            and not isinstance(answer, bool)
            and answer == question.correct_answer
        )

    return AnswerResult(
        correct=is_correct,
        feedback="Correct!" if is_correct else "Incorrect.",
        user_answer=_answer_text(question, answer),
        correct_answer=_correct_text(question),
        explanation=question.explanation,
    )


def score_quiz(questions: Sequence[QuizQuestion], answers: Sequence[Any]) -> QuizOutcome:
    """
    Grade a whole quiz.

    Unanswered trailing questions count as wrong, so total is always the
    number of questions asked.
    """
    item_results = []
    for index, question in enumerate(questions):
        answer = answers[index] if index < len(answers) else None
        result = check_answer(question, answer)
        item_results.append(ItemResult(item_id=question.item_id, correct=result.correct))

    correct = sum(1 for r in item_results if r.correct)
    return QuizOutcome(correct=correct, total=len(questions), item_results=item_results)
