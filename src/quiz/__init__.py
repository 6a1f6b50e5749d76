"""
Quiz module: question generation and grading.

Question Types:
- multiple-choice: term prompt, four definitions (one correct, three distractors)
- true-false: term paired with its own or another item's definition

Distractors are drawn from the whole corpus; their descriptions never repeat
the correct answer or each other.
"""

from .generator import generate_multiple_choice, generate_quiz, generate_true_false, pick_distractors
from .grading import AnswerResult, QuizOutcome, check_answer, quiz_id_for_module, score_quiz

__all__ = [
    "generate_quiz",
    "generate_multiple_choice",
    "generate_true_false",
    "pick_distractors",
    "AnswerResult",
    "QuizOutcome",
    "check_answer",
    "score_quiz",
    "quiz_id_for_module",
]
