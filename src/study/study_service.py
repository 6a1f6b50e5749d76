"""
Study Service.

Provides high-level operations for the CLI:
- Curriculum lookups (modules, lessons, quizzable modules)
- Lesson completion and quiz recording
- Quiz generation scoped to a module
- Dashboard summary

Every mutation follows the same two steps: run the progress transition, then
evaluate achievements against the result and merge them. The snapshot is
saved after each mutation.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from loguru import logger

from src.core.models import Lesson, MasteryLevel, Module, QuizQuestion, StudyItem, UserProgress
from src.curriculum.builder import build_modules, find_lesson, find_module, quizzable_modules
from src.progress.achievements import Achievement, apply_achievements, check_new_achievements
from src.progress.engine import (
    LevelInfo,
    complete_lesson,
    get_item_mastery,
    get_level,
    mastered_count,
    record_quiz_result,
)
from src.progress.store import ProgressStore
from src.quiz.generator import generate_quiz
from src.quiz.grading import QuizOutcome, quiz_id_for_module


@dataclass
class DashboardStats:
    """Summary for the stats screen."""

    level: LevelInfo
    xp: int
    streak: int
    items_total: int
    items_studied: int
    items_mastered: int
    lessons_completed: int
    lessons_total: int
    quizzes_taken: int
    correct_answers: int
    achievements_unlocked: int


class StudyService:
    """
    High-level service for study operations.

    Coordinates the curriculum, quiz generator, progress engine and the
    injected progress store.
    """

    def __init__(
        self,
        items: Sequence[StudyItem],
        store: ProgressStore,
        rng: random.Random | None = None,
    ):
        """
        Initialize study service.

        Args:
            items: Full corpus
            store: Where the progress snapshot is loaded from and saved to
            rng: Optional random source for quizzes
        """
        self.items = list(items)
        self.store = store
        self.rng = rng
        self.modules: list[Module] = build_modules(self.items)
        self.progress: UserProgress = store.load_progress()

    # ========================================
    # Curriculum
    # ========================================

    def get_module(self, module_id: str) -> Module:
        return find_module(self.modules, module_id)

    def get_lesson(self, lesson_id: str) -> Lesson:
        return find_lesson(self.modules, lesson_id)

    def quizzable_modules(self, min_items: int = 4) -> list[Module]:
        return quizzable_modules(self.modules, min_items)

    def is_lesson_completed(self, lesson_id: str) -> bool:
        return lesson_id in self.progress.completed_lessons

    def item_mastery(self, item_id: str) -> MasteryLevel:
        return get_item_mastery(self.progress, item_id)

    def best_score(self, module_id: str) -> int | None:
        """Best recorded quiz score for a module, or None if never taken."""
        return self.progress.quiz_high_scores.get(quiz_id_for_module(module_id))

    # ========================================
    # Mutations
    # ========================================

    def _commit(self, progress: UserProgress) -> list[Achievement]:
        unlocked = check_new_achievements(progress)
        self.progress = apply_achievements(progress, unlocked)
        self.store.save_progress(self.progress)
        return unlocked

    def complete_lesson(self, lesson_id: str, today: date | None = None) -> list[Achievement]:
        """
        Mark a lesson complete and persist.

        Returns:
            Achievements unlocked by this completion
        """
        lesson = self.get_lesson(lesson_id)
        updated = complete_lesson(self.progress, lesson.id, lesson.item_ids, today)
        if updated is self.progress:
            return []
        return self._commit(updated)

    def start_quiz(self, module_id: str, count: int = 10) -> list[QuizQuestion]:
        """Questions about one module, with distractors from the whole corpus."""
        module = self.get_module(module_id)
        questions = generate_quiz(module.items, self.items, count, self.rng)
        logger.debug(f"Quiz for {module_id}: {len(questions)} questions")
        return questions

    def record_quiz(
        self,
        module_id: str,
        outcome: QuizOutcome,
        today: date | None = None,
    ) -> list[Achievement]:
        """
        Record a finished module quiz and persist.

        Returns:
            Achievements unlocked by this result
        """
        self.get_module(module_id)
        updated = record_quiz_result(
            self.progress,
            quiz_id_for_module(module_id),
            outcome.correct,
            outcome.total,
            outcome.item_results,
            today,
        )
        return self._commit(updated)

    # ========================================
    # Summary
    # ========================================

    def dashboard(self) -> DashboardStats:
        progress = self.progress
        return DashboardStats(
            level=get_level(progress.xp),
            xp=progress.xp,
            streak=progress.streak,
            items_total=len(self.items),
            items_studied=progress.total_items_studied,
            items_mastered=mastered_count(progress),
            lessons_completed=len(progress.completed_lessons),
            lessons_total=sum(len(m.lessons) for m in self.modules),
            quizzes_taken=progress.total_quizzes_taken,
            correct_answers=progress.total_correct_answers,
            achievements_unlocked=len(progress.achievements),
        )
