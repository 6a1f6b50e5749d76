"""
Unit tests for quiz question generation.
"""

import random

import pytest

from src.core.models import NOT_SPECIFIED, QuestionType
from src.quiz.generator import (
    describe,
    generate_multiple_choice,
    generate_quiz,
    generate_true_false,
    is_askable,
    pick_distractors,
)


class FixedRandom(random.Random):
    """Random whose random() is pinned, fixing question type and polarity."""

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def random(self):
        return self.value


class TestDescribe:
    def test_prefers_what_it_is(self, item_factory):
        item = item_factory("a", "Git", "VCS", what_it_is="a version control system")
        assert describe(item) == "a version control system"

    def test_falls_back_to_definition(self, item_factory):
        item = item_factory("a", "Git", "VCS", what_it_is=NOT_SPECIFIED, definition="Tracks changes")
        assert describe(item) == "Tracks changes"

    def test_skips_text_equal_to_term(self, item_factory):
        item = item_factory("a", "Git", "VCS", what_it_is="Git", definition="Tracks changes")
        assert describe(item) == "Tracks changes"

    def test_term_when_nothing_usable(self, item_factory):
        item = item_factory("a", "Git", "VCS", what_it_is=NOT_SPECIFIED, definition="")
        assert describe(item) == "Git"
        assert not is_askable(item)


class TestPickDistractors:
    def test_excludes_correct_item_and_unspecified(self, item_factory, sample_items, rng):
        bare = item_factory("bare", "Bare", "C", what_it_is=NOT_SPECIFIED)
        pool = sample_items + [bare]
        chosen = pick_distractors(sample_items[0], pool, 50, rng)

        ids = {item.id for item in chosen}
        assert sample_items[0].id not in ids
        assert "bare" not in ids
        assert len(chosen) == len(sample_items) - 1

    def test_caps_at_count(self, sample_items, rng):
        assert len(pick_distractors(sample_items[0], sample_items, 3, rng)) == 3

    def test_skips_items_sharing_the_correct_description(self, item_factory, sample_items, rng):
        git_tool = item_factory("git-tool", "git", "VCS", kind="tool", what_it_is="a version control system")
        git_cmd = item_factory("git-cmd", "git", "VCS", kind="command", what_it_is="a version control system")
        chosen = pick_distractors(git_tool, [git_cmd] + sample_items, 50, rng)

        assert "git-cmd" not in {item.id for item in chosen}

    def test_picked_descriptions_are_unique(self, item_factory, sample_items, rng):
        twins = [
            item_factory(f"dup-{n}", f"Dup {n}", "C", what_it_is="a shared description") for n in range(3)
        ]
        chosen = pick_distractors(sample_items[0], twins + sample_items, 50, rng)
        texts = [describe(item) for item in chosen]

        assert len(texts) == len(set(texts))
        assert texts.count("a shared description") == 1


class TestMultipleChoice:
    def test_shape(self, sample_items, rng):
        item = sample_items[0]
        question = generate_multiple_choice(item, sample_items, rng)

        assert question.id == f"mc-{item.id}"
        assert question.type is QuestionType.MULTIPLE_CHOICE
        assert question.question == f'What is "{item.term}"?'
        assert len(question.options) == 4
        assert question.options[question.correct_answer] == describe(item)
        assert question.explanation == describe(item)
        assert question.item_id == item.id

    def test_needs_three_distractors(self, sample_items, rng):
        assert generate_multiple_choice(sample_items[0], sample_items[:3], rng) is None

    def test_unaskable_item(self, item_factory, sample_items, rng):
        item = item_factory("a", "Git", "VCS", what_it_is=NOT_SPECIFIED, definition="Git")
        assert generate_multiple_choice(item, sample_items, rng) is None

    def test_options_never_repeat(self, item_factory):
        shared = "a version control system"
        git_tool = item_factory("git-tool", "git", "VCS", kind="tool", what_it_is=shared)
        pool = [
            git_tool,
            item_factory("git-cmd", "git", "VCS", kind="command", what_it_is=shared),
            item_factory("svn", "svn", "VCS", what_it_is="a centralized version control system"),
            item_factory("hg", "hg", "VCS", what_it_is="a distributed version control system"),
            item_factory("cvs", "cvs", "VCS", what_it_is="an older version control system"),
        ]
        for seed in range(50):
            question = generate_multiple_choice(git_tool, pool, random.Random(seed))
            assert len(set(question.options)) == 4
            assert question.options.count(shared) == 1

    def test_duplicate_descriptions_do_not_count_as_distractors(self, item_factory, rng):
        shared = "a version control system"
        git_tool = item_factory("git-tool", "git", "VCS", kind="tool", what_it_is=shared)
        pool = [
            git_tool,
            item_factory("git-cmd", "git", "VCS", kind="command", what_it_is=shared),
            item_factory("svn", "svn", "VCS", what_it_is="a centralized version control system"),
            item_factory("hg", "hg", "VCS", what_it_is="a distributed version control system"),
        ]
        assert generate_multiple_choice(git_tool, pool, rng) is None


class TestTrueFalse:
    def test_true_polarity(self, sample_items):
        item = sample_items[0]
        question = generate_true_false(item, sample_items, FixedRandom(0.9))

        assert question.id == f"tf-{item.id}"
        assert question.type is QuestionType.TRUE_FALSE
        assert question.correct_answer is True
        assert describe(item) in question.question
        assert question.options is None

    def test_false_polarity_uses_other_description(self, sample_items):
        item = sample_items[0]
        question = generate_true_false(item, sample_items, FixedRandom(0.1))

        assert question.correct_answer is False
        assert describe(item) not in question.question
        assert question.explanation.startswith("False.")

    def test_false_polarity_without_distractor_fails(self, sample_items):
        assert generate_true_false(sample_items[0], sample_items[:1], FixedRandom(0.1)) is None

    def test_false_polarity_never_states_own_description(self, item_factory):
        git_tool = item_factory("git-tool", "git", "VCS", kind="tool", what_it_is="a version control system")
        git_cmd = item_factory("git-cmd", "git", "VCS", kind="command", what_it_is="a version control system")
        assert generate_true_false(git_tool, [git_tool, git_cmd], FixedRandom(0.1)) is None

    def test_true_polarity_needs_no_distractor(self, sample_items):
        assert generate_true_false(sample_items[0], sample_items[:1], FixedRandom(0.9)) is not None

    def test_statement_ends_with_single_period(self, item_factory, sample_items):
        item = item_factory("a", "Git", "VCS", what_it_is="a version control system.")
        question = generate_true_false(item, sample_items, FixedRandom(0.9))
        assert question.question.endswith("system.")
        assert not question.question.endswith("..")


class TestGenerateQuiz:
    def test_respects_count(self, sample_items, rng):
        questions = generate_quiz(sample_items, sample_items, count=5, rng=rng)
        assert len(questions) == 5

    def test_one_question_per_item(self, sample_items, rng):
        questions = generate_quiz(sample_items, sample_items, count=100, rng=rng)
        item_ids = [q.item_id for q in questions]
        assert len(item_ids) == len(set(item_ids))
        assert len(questions) <= len(sample_items)

    def test_questions_only_about_scoped_items(self, sample_items, rng):
        scope = sample_items[:4]
        questions = generate_quiz(scope, sample_items, count=10, rng=rng)
        assert {q.item_id for q in questions} <= {item.id for item in scope}

    def test_all_multiple_choice_with_full_pool(self, sample_items):
        questions = generate_quiz(sample_items[:4], sample_items, count=10, rng=FixedRandom(0.0))
        assert len(questions) == 4
        assert all(q.type is QuestionType.MULTIPLE_CHOICE for q in questions)

    def test_failed_attempt_is_not_retried(self, sample_items):
        """MC on a tiny pool fails and the item is skipped, not asked as true/false."""
        questions = generate_quiz(sample_items[:2], sample_items[:2], count=10, rng=FixedRandom(0.0))
        assert questions == []

    @pytest.mark.parametrize("count", [0, 1])
    def test_small_counts(self, sample_items, rng, count):
        assert len(generate_quiz(sample_items, sample_items, count=count, rng=rng)) == count

    def test_empty_scope(self, sample_items, rng):
        assert generate_quiz([], sample_items, rng=rng) == []
