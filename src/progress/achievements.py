"""
Achievement definitions and evaluation.

Achievements are static data; whether one is unlocked lives in
UserProgress.achievements. Evaluation is a separate step the caller runs after
each transition:

    progress = complete_lesson(progress, lesson.id, lesson.item_ids)
    unlocked = check_new_achievements(progress)
    progress = apply_achievements(progress, unlocked)

Bonus XP from a batch is added after the batch is evaluated, so it cannot
unlock further achievements in the same pass (XP thresholds included).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from loguru import logger

from src.core.models import UserProgress
from src.progress.engine import mastered_count

# Size of the corpus the "study everything" achievement was written for.
TOTAL_CORPUS_ITEMS = 632


@dataclass(frozen=True)
class Achievement:
    """A named milestone with an XP reward."""

    id: str
    title: str
    description: str
    icon: str
    xp_reward: int
    condition: Callable[[UserProgress], bool]


def _lessons_completed(count: int) -> Callable[[UserProgress], bool]:
    def condition(progress: UserProgress) -> bool:
        return len(progress.completed_lessons) >= count

    condition.__name__ = f"lessons_completed_{count}"
    return condition


def _quizzes_taken(count: int) -> Callable[[UserProgress], bool]:
    def condition(progress: UserProgress) -> bool:
        return progress.total_quizzes_taken >= count

    condition.__name__ = f"quizzes_taken_{count}"
    return condition


def _streak_reached(days: int) -> Callable[[UserProgress], bool]:
    def condition(progress: UserProgress) -> bool:
        return progress.streak >= days

    condition.__name__ = f"streak_reached_{days}"
    return condition


def _items_studied(count: int) -> Callable[[UserProgress], bool]:
    def condition(progress: UserProgress) -> bool:
        return progress.total_items_studied >= count

    condition.__name__ = f"items_studied_{count}"
    return condition


def _items_mastered(count: int) -> Callable[[UserProgress], bool]:
    def condition(progress: UserProgress) -> bool:
        return mastered_count(progress) >= count

    condition.__name__ = f"items_mastered_{count}"
    return condition


def _xp_earned(amount: int) -> Callable[[UserProgress], bool]:
    def condition(progress: UserProgress) -> bool:
        return progress.xp >= amount

    condition.__name__ = f"xp_earned_{amount}"
    return condition


def has_perfect_score(progress: UserProgress) -> bool:
    """Any quiz with a 100% best score."""
    return any(score == 100 for score in progress.quiz_high_scores.values())


ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement("first-lesson", "First Steps", "Complete your first lesson",
                "\U0001F476", 25, _lessons_completed(1)),
    Achievement("five-lessons", "Getting Serious", "Complete 5 lessons",
                "\U0001F4DA", 50, _lessons_completed(5)),
    Achievement("twenty-lessons", "Dedicated Learner", "Complete 20 lessons",
                "\U0001F393", 100, _lessons_completed(20)),
    Achievement("fifty-lessons", "Knowledge Seeker", "Complete 50 lessons",
                "\U0001F9D9", 200, _lessons_completed(50)),
    Achievement("first-quiz", "Quiz Taker", "Complete your first quiz",
                "\U0001F4DD", 25, _quizzes_taken(1)),
    Achievement("ten-quizzes", "Quiz Master", "Complete 10 quizzes",
                "\U0001F3AF", 75, _quizzes_taken(10)),
    Achievement("perfect-score", "Perfectionist", "Get 100% on a quiz",
                "\U0001F4AF", 50, has_perfect_score),
    Achievement("streak-3", "On Fire", "Reach a 3-day streak",
                "\U0001F525", 30, _streak_reached(3)),
    Achievement("streak-7", "Week Warrior", "Reach a 7-day streak",
                "\U0001F4AA", 75, _streak_reached(7)),
    Achievement("streak-30", "Unstoppable", "Reach a 30-day streak",
                "\U0001F451", 300, _streak_reached(30)),
    Achievement("items-50", "Half Century", "Study 50 items",
                "\U0001F3C5", 50, _items_studied(50)),
    Achievement("items-100", "Century", "Study 100 items",
                "\U0001F3C6", 100, _items_studied(100)),
    Achievement("items-300", "Scholar", "Study 300 items",
                "\U0001F4D6", 200, _items_studied(300)),
    Achievement("items-all", "Completionist", f"Study all {TOTAL_CORPUS_ITEMS} items",
                "\U0001F48E", 500, _items_studied(TOTAL_CORPUS_ITEMS)),
    Achievement("mastered-10", "Mastery Begins", "Master 10 items",
                "⭐", 50, _items_mastered(10)),
    Achievement("mastered-50", "True Mastery", "Master 50 items",
                "\U0001F31F", 150, _items_mastered(50)),
    Achievement("xp-1000", "XP Milestone", "Earn 1,000 XP",
                "\U0001F4B0", 50, _xp_earned(1000)),
    Achievement("xp-5000", "XP Legend", "Earn 5,000 XP",
                "\U0001F48E", 100, _xp_earned(5000)),
)

ACHIEVEMENTS_BY_ID = {achievement.id: achievement for achievement in ACHIEVEMENTS}


def check_new_achievements(
    progress: UserProgress,
    achievements: Iterable[Achievement] = ACHIEVEMENTS,
) -> list[Achievement]:
    """Achievements not yet unlocked whose condition holds for this snapshot."""
    unlocked = set(progress.achievements)
    return [a for a in achievements if a.id not in unlocked and a.condition(progress)]


def apply_achievements(progress: UserProgress, unlocked: Iterable[Achievement]) -> UserProgress:
    """
    Merge newly unlocked achievements into the snapshot.

    Their XP is added directly; unlike add_xp this does not touch the streak.
    """
    unlocked = [a for a in unlocked if a.id not in progress.achievements]
    if not unlocked:
        return progress

    snapshot = progress.model_copy(deep=True)
    snapshot.achievements.extend(a.id for a in unlocked)
    snapshot.xp += sum(a.xp_reward for a in unlocked)

    for achievement in unlocked:
        logger.info(f"Achievement unlocked: {achievement.title} (+{achievement.xp_reward} XP)")
    return snapshot
