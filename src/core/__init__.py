"""
Core Module - Shared domain models and helpers.

Components:
- models: StudyItem, Module/Lesson, UserProgress, quiz shapes, MasteryLevel
- shuffle: Unbiased shuffle used by quizzes and learning decks
- exceptions: Error hierarchy raised across the package
- logging: Loguru sink configuration for the CLI

All feature packages (src/curriculum/, src/quiz/, src/progress/, src/study/)
import shared concepts from here rather than redefining them.
"""

from src.core.exceptions import (
    CodeLearnerError,
    CorpusError,
    UnknownLessonError,
    UnknownModuleError,
)
from src.core.models import (
    NOT_SPECIFIED,
    ItemKind,
    ItemResult,
    Lesson,
    MasteryLevel,
    Module,
    QuestionType,
    QuizQuestion,
    StudyItem,
    UserProgress,
    has_content,
)
from src.core.shuffle import shuffle

__all__ = [
    # Models
    "NOT_SPECIFIED",
    "ItemKind",
    "ItemResult",
    "Lesson",
    "MasteryLevel",
    "Module",
    "QuestionType",
    "QuizQuestion",
    "StudyItem",
    "UserProgress",
    "has_content",
    # Helpers
    "shuffle",
    # Errors
    "CodeLearnerError",
    "CorpusError",
    "UnknownLessonError",
    "UnknownModuleError",
]
