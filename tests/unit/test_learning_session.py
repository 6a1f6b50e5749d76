"""
Unit tests for the flash-card learning session.
"""

import random

from src.study.learning import LearningSession


class TestLearningSession:
    def test_deck_is_permutation(self, sample_items, rng):
        session = LearningSession(sample_items, rng)
        assert sorted(item.id for item in session.deck) == sorted(item.id for item in sample_items)
        assert session.total == len(sample_items)

    def test_walk_through(self, sample_items, rng):
        session = LearningSession(sample_items[:3], rng)
        first = session.current

        session.got_it()
        session.review_again()
        assert session.percent_complete == 66
        session.got_it()

        assert session.is_complete
        assert session.current is None
        assert session.got_count == 2
        assert session.review_count == 1
        assert session.flagged_items == [session.deck[1]]
        assert first is session.deck[0]

    def test_actions_after_end_are_ignored(self, sample_items, rng):
        session = LearningSession(sample_items[:1], rng)
        session.got_it()
        session.got_it()
        session.review_again()
        assert session.got_count == 1
        assert session.review_count == 0
        assert session.percent_complete == 100

    def test_restart_resets(self, sample_items):
        session = LearningSession(sample_items, random.Random(3))
        session.review_again()
        session.restart()
        assert session.position == 0
        assert session.flagged == []

    def test_empty_deck(self):
        session = LearningSession([])
        assert session.is_complete
        assert session.percent_complete == 0
