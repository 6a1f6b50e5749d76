"""
Progress Engine.

Pure transitions over the UserProgress snapshot. Each function takes a
snapshot plus event arguments and returns a new snapshot; the input is never
modified and the result shares no mutable containers with it.

Transitions:
- complete_lesson: idempotent, +50 XP, new items become "seen"
- record_quiz_result: repeatable, high score kept as max, mastery steps
- add_xp: every XP award also re-evaluates the daily streak

`today` is injectable on every transition for deterministic tests; it
defaults to the local calendar date.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from loguru import logger

from src.core.models import ItemResult, MasteryLevel, UserProgress

LESSON_XP = 50
XP_PER_CORRECT_ANSWER = 10
PERFECT_QUIZ_BONUS = 25

LEVEL_THRESHOLDS = (0, 100, 250, 500, 1000, 1750, 2750, 4000, 5500, 7500, 10000)
LEVEL_TITLES = (
    "Beginner",
    "Novice",
    "Apprentice",
    "Student",
    "Coder",
    "Developer",
    "Engineer",
    "Architect",
    "Expert",
    "Master",
    "Grandmaster",
)
XP_PER_LEVEL_AFTER_MAX = 2500


@dataclass(frozen=True)
class LevelInfo:
    """Display level derived from total XP."""

    level: int  # 1-indexed
    current_xp: int  # XP earned inside the current level
    required_xp: int  # XP span of the current level
    title: str

    @property
    def percent(self) -> int:
        return min(100, self.current_xp * 100 // self.required_xp)


def score_percent(correct: int, total: int) -> int:
    """Quiz score as a whole percent, rounding halves up; 0 for empty quizzes."""
    if total <= 0:
        return 0
    return math.floor(100 * correct / total + 0.5)


def _resolve_today(today: date | None) -> date:
    return today or date.today()


def _apply_streak(snapshot: UserProgress, today: date) -> None:
    today_str = today.isoformat()
    if snapshot.last_study_date == today_str:
        return
    yesterday = (today - timedelta(days=1)).isoformat()
    snapshot.streak = snapshot.streak + 1 if snapshot.last_study_date == yesterday else 1
    snapshot.last_study_date = today_str


def update_streak(progress: UserProgress, today: date | None = None) -> UserProgress:
    """
    Credit today's activity to the streak.

    At most one increment per calendar day: same day is a no-op, a study day
    right after the last one extends the streak, any gap restarts it at 1.
    """
    today = _resolve_today(today)
    if progress.last_study_date == today.isoformat():
        return progress
    snapshot = progress.model_copy(deep=True)
    _apply_streak(snapshot, today)
    return snapshot


def add_xp(progress: UserProgress, amount: int, today: date | None = None) -> UserProgress:
    """Award XP and update the streak."""
    snapshot = progress.model_copy(deep=True)
    snapshot.xp += amount
    _apply_streak(snapshot, _resolve_today(today))
    return snapshot


def complete_lesson(
    progress: UserProgress,
    lesson_id: str,
    item_ids: Iterable[str],
    today: date | None = None,
) -> UserProgress:
    """
    Mark a lesson complete.

    Replaying a completed lesson returns the input unchanged, so XP and the
    studied-item counter are only ever credited once per lesson.
    """
    if lesson_id in progress.completed_lessons:
        logger.debug(f"Lesson {lesson_id} already completed")
        return progress

    snapshot = progress.model_copy(deep=True)
    snapshot.completed_lessons.append(lesson_id)
    for item_id in item_ids:
        if snapshot.item_mastery.get(item_id, MasteryLevel.NEW) is MasteryLevel.NEW:
            snapshot.item_mastery[item_id] = MasteryLevel.SEEN
            snapshot.total_items_studied += 1

    logger.info(f"Lesson {lesson_id} completed (+{LESSON_XP} XP)")
    return add_xp(snapshot, LESSON_XP, today)


def record_quiz_result(
    progress: UserProgress,
    quiz_id: str,
    correct: int,
    total: int,
    item_results: Iterable[ItemResult],
    today: date | None = None,
) -> UserProgress:
    """
    Fold a finished quiz into the snapshot.

    Always applies; retaking a quiz is expected. The stored high score for
    quiz_id never decreases.
    """
    score = score_percent(correct, total)
    snapshot = progress.model_copy(deep=True)

    snapshot.quiz_high_scores[quiz_id] = max(score, snapshot.quiz_high_scores.get(quiz_id, 0))

    for result in item_results:
        current = snapshot.item_mastery.get(result.item_id, MasteryLevel.NEW)
        updated = current.advance() if result.correct else current.regress()
        if updated is not current or result.item_id in snapshot.item_mastery:
            snapshot.item_mastery[result.item_id] = updated

    snapshot.total_quizzes_taken += 1
    snapshot.total_correct_answers += correct

    xp_gain = correct * XP_PER_CORRECT_ANSWER + (PERFECT_QUIZ_BONUS if score == 100 else 0)
    logger.info(f"Quiz {quiz_id}: {correct}/{total} ({score}%) +{xp_gain} XP")
    return add_xp(snapshot, xp_gain, today)


def get_item_mastery(progress: UserProgress, item_id: str) -> MasteryLevel:
    """Mastery of one item; unseen items are new."""
    return progress.item_mastery.get(item_id, MasteryLevel.NEW)


def mastered_count(progress: UserProgress) -> int:
    """Number of items at mastered level."""
    return sum(1 for level in progress.item_mastery.values() if level is MasteryLevel.MASTERED)


def get_level(xp: int) -> LevelInfo:
    """
    Map total XP onto the level table.

    Past the last threshold the level stays at the top title and each further
    2500 XP is shown as the next span.
    """
    index = 0
    for i in range(len(LEVEL_THRESHOLDS) - 1, -1, -1):
        if xp >= LEVEL_THRESHOLDS[i]:
            index = i
            break

    if index < len(LEVEL_THRESHOLDS) - 1:
        required = LEVEL_THRESHOLDS[index + 1] - LEVEL_THRESHOLDS[index]
    else:
        required = XP_PER_LEVEL_AFTER_MAX

    return LevelInfo(
        level=index + 1,
        current_xp=xp - LEVEL_THRESHOLDS[index],
        required_xp=required,
        title=LEVEL_TITLES[index],
    )
