"""
Unit tests for the progress engine transitions.

Every transition gets an explicit `today` so streak behavior is deterministic.
"""

from datetime import date, timedelta

import pytest

from src.core.models import ItemResult, MasteryLevel, UserProgress
from src.progress.engine import (
    LESSON_XP,
    add_xp,
    complete_lesson,
    get_item_mastery,
    get_level,
    mastered_count,
    record_quiz_result,
    score_percent,
    update_streak,
)


class TestScorePercent:
    @pytest.mark.parametrize(
        "correct,total,expected",
        [(0, 5, 0), (5, 5, 100), (1, 3, 33), (2, 3, 67), (1, 8, 13), (1, 200, 1), (0, 0, 0)],
    )
    def test_rounding(self, correct, total, expected):
        assert score_percent(correct, total) == expected


class TestStreak:
    def test_first_activity_starts_streak(self, fresh_progress, today):
        progress = update_streak(fresh_progress, today)
        assert progress.streak == 1
        assert progress.last_study_date == "2024-03-10"

    def test_same_day_is_noop(self, fresh_progress, today):
        progress = update_streak(fresh_progress, today)
        assert update_streak(progress, today) is progress

    def test_consecutive_days_extend(self, fresh_progress, today):
        progress = update_streak(fresh_progress, today)
        progress = update_streak(progress, today + timedelta(days=1))
        assert progress.streak == 2

    def test_gap_resets_to_one(self, fresh_progress, today):
        progress = update_streak(fresh_progress, today)
        progress = update_streak(progress, today + timedelta(days=1))
        progress = update_streak(progress, today + timedelta(days=3))
        assert progress.streak == 1

    def test_month_boundary(self, fresh_progress):
        progress = update_streak(fresh_progress, date(2024, 2, 29))
        progress = update_streak(progress, date(2024, 3, 1))
        assert progress.streak == 2

    def test_xp_awards_update_streak(self, fresh_progress, today):
        progress = add_xp(fresh_progress, 10, today)
        progress = add_xp(progress, 10, today)
        progress = add_xp(progress, 10, today + timedelta(days=1))
        assert progress.xp == 30
        assert progress.streak == 2


class TestCompleteLesson:
    def test_awards_xp_and_marks_seen(self, fresh_progress, today):
        progress = complete_lesson(fresh_progress, "m-lesson-0", ["a", "b"], today)

        assert progress.xp == LESSON_XP
        assert progress.completed_lessons == ["m-lesson-0"]
        assert progress.item_mastery == {"a": MasteryLevel.SEEN, "b": MasteryLevel.SEEN}
        assert progress.total_items_studied == 2
        assert progress.streak == 1

    def test_input_not_modified(self, fresh_progress, today):
        complete_lesson(fresh_progress, "m-lesson-0", ["a"], today)
        assert fresh_progress == UserProgress()

    def test_idempotent(self, fresh_progress, today):
        once = complete_lesson(fresh_progress, "m-lesson-0", ["a", "b"], today)
        twice = complete_lesson(once, "m-lesson-0", ["a", "b"], today + timedelta(days=1))

        assert twice is once
        assert twice.xp == LESSON_XP
        assert twice.total_items_studied == 2

    def test_does_not_downgrade_mastery(self, today):
        progress = UserProgress(item_mastery={"a": MasteryLevel.MASTERED})
        progress = complete_lesson(progress, "m-lesson-0", ["a", "b"], today)

        assert progress.item_mastery["a"] is MasteryLevel.MASTERED
        assert progress.item_mastery["b"] is MasteryLevel.SEEN
        assert progress.total_items_studied == 1


class TestRecordQuizResult:
    def test_xp_and_counters(self, fresh_progress, today):
        results = [ItemResult("a", True), ItemResult("b", True), ItemResult("c", False)]
        progress = record_quiz_result(fresh_progress, "quiz-m", 2, 3, results, today)

        assert progress.xp == 20
        assert progress.quiz_high_scores == {"quiz-m": 67}
        assert progress.total_quizzes_taken == 1
        assert progress.total_correct_answers == 2

    def test_perfect_bonus(self, fresh_progress, today):
        results = [ItemResult("a", True), ItemResult("b", True)]
        progress = record_quiz_result(fresh_progress, "quiz-m", 2, 2, results, today)
        assert progress.xp == 20 + 25

    def test_high_score_never_decreases(self, fresh_progress, today):
        progress = record_quiz_result(fresh_progress, "quiz-m", 4, 5, [], today)
        progress = record_quiz_result(progress, "quiz-m", 1, 5, [], today)
        assert progress.quiz_high_scores["quiz-m"] == 80
        assert progress.total_quizzes_taken == 2

    def test_empty_quiz(self, fresh_progress, today):
        progress = record_quiz_result(fresh_progress, "quiz-m", 0, 0, [], today)
        assert progress.quiz_high_scores["quiz-m"] == 0
        assert progress.xp == 0
        assert progress.total_quizzes_taken == 1

    def test_mastery_steps(self, today):
        progress = UserProgress(
            item_mastery={
                "seen": MasteryLevel.SEEN,
                "learning": MasteryLevel.LEARNING,
                "mastered": MasteryLevel.MASTERED,
                "slipping": MasteryLevel.MASTERED,
                "shaky": MasteryLevel.LEARNING,
            }
        )
        results = [
            ItemResult("new", True),
            ItemResult("seen", True),
            ItemResult("learning", True),
            ItemResult("mastered", True),
            ItemResult("slipping", False),
            ItemResult("shaky", False),
        ]
        progress = record_quiz_result(progress, "quiz-m", 4, 6, results, today)

        assert progress.item_mastery == {
            "new": MasteryLevel.LEARNING,
            "seen": MasteryLevel.LEARNING,
            "learning": MasteryLevel.MASTERED,
            "mastered": MasteryLevel.MASTERED,
            "slipping": MasteryLevel.LEARNING,
            "shaky": MasteryLevel.LEARNING,
        }

    def test_wrong_answer_on_unseen_item_writes_nothing(self, fresh_progress, today):
        progress = record_quiz_result(fresh_progress, "quiz-m", 0, 1, [ItemResult("x", False)], today)
        assert "x" not in progress.item_mastery

    def test_repeat_is_allowed(self, fresh_progress, today):
        first = record_quiz_result(fresh_progress, "quiz-m", 1, 1, [ItemResult("a", True)], today)
        second = record_quiz_result(first, "quiz-m", 1, 1, [ItemResult("a", True)], today)
        assert second.xp == 2 * (10 + 25)
        assert second.item_mastery["a"] is MasteryLevel.MASTERED


class TestMasteryQueries:
    def test_unknown_item_is_new(self, fresh_progress):
        assert get_item_mastery(fresh_progress, "nope") is MasteryLevel.NEW

    def test_mastered_count(self):
        progress = UserProgress(
            item_mastery={"a": MasteryLevel.MASTERED, "b": MasteryLevel.LEARNING, "c": MasteryLevel.MASTERED}
        )
        assert mastered_count(progress) == 2


class TestLevels:
    @pytest.mark.parametrize(
        "xp,level,title,current,required",
        [
            (0, 1, "Beginner", 0, 100),
            (99, 1, "Beginner", 99, 100),
            (100, 2, "Novice", 0, 150),
            (600, 4, "Student", 100, 500),
            (9999, 10, "Master", 2499, 2500),
            (10000, 11, "Grandmaster", 0, 2500),
            (13000, 11, "Grandmaster", 3000, 2500),
        ],
    )
    def test_get_level(self, xp, level, title, current, required):
        info = get_level(xp)
        assert (info.level, info.title, info.current_xp, info.required_xp) == (level, title, current, required)

    def test_percent_capped(self):
        assert get_level(50).percent == 50
        assert get_level(13000).percent == 100
