"""
Learning mode: a shuffled flash-card deck.

The deck is a plain shuffle of the chosen items, walked once. Items the
learner marks "review again" are collected for the end-of-session summary.
There is no scheduling between sessions.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from src.core.models import StudyItem
from src.core.shuffle import shuffle


class LearningSession:
    """One pass through a shuffled deck."""

    def __init__(self, items: Sequence[StudyItem], rng: random.Random | None = None):
        self._items = list(items)
        self._rng = rng
        self.restart()

    def restart(self) -> None:
        """Reshuffle the deck and clear the score."""
        self.deck = shuffle(self._items, self._rng)
        self.position = 0
        self.got_count = 0
        self.flagged: list[str] = []

    @property
    def total(self) -> int:
        return len(self.deck)

    @property
    def is_complete(self) -> bool:
        return self.position >= self.total

    @property
    def current(self) -> StudyItem | None:
        return None if self.is_complete else self.deck[self.position]

    @property
    def percent_complete(self) -> int:
        return self.position * 100 // self.total if self.total else 0

    @property
    def review_count(self) -> int:
        return len(self.flagged)

    @property
    def flagged_items(self) -> list[StudyItem]:
        """Flagged items in deck order."""
        flagged = set(self.flagged)
        return [item for item in self.deck if item.id in flagged]

    def got_it(self) -> None:
        """Current card known; move on."""
        if self.is_complete:
            return
        self.got_count += 1
        self.position += 1

    def review_again(self) -> None:
        """Flag the current card for review; move on."""
        current = self.current
        if current is None:
            return
        self.flagged.append(current.id)
        self.position += 1
