"""
Shared domain models.

- StudyItem: one atomic fact from the pre-built corpus (immutable)
- Module / Lesson: curriculum structure derived from the corpus
- UserProgress: the single mutable snapshot of learner state
- QuizQuestion / ItemResult: ephemeral quiz session shapes

StudyItem and UserProgress are Pydantic models because they cross the JSON
boundary (corpus file, persisted snapshot). Both accept camelCase or
snake_case keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NOT_SPECIFIED = "Not specified in the JSON."
NOT_SPECIFIED_PREFIX = "Not specified"


def has_content(text: str | None) -> bool:
    """True when a descriptive field holds real prose, not the sentinel."""
    return bool(text) and not text.startswith(NOT_SPECIFIED_PREFIX)


class ItemKind(str, Enum):
    """Fixed set of study item kinds."""

    CONCEPT = "concept"
    TOOL = "tool"
    COMMAND = "command"
    LIBRARY = "library"
    SERVICE = "service"
    PATTERN = "pattern"
    FRAMEWORK = "framework"
    LANGUAGE_FEATURE = "language-feature"


class MasteryLevel(str, Enum):
    """
    Per-item mastery, ordered new < seen < learning < mastered.

    Correct answers advance one step (new and seen both go to learning);
    an incorrect answer only pulls mastered back to learning.
    """

    NEW = "new"
    SEEN = "seen"
    LEARNING = "learning"
    MASTERED = "mastered"

    def advance(self) -> MasteryLevel:
        if self in (MasteryLevel.NEW, MasteryLevel.SEEN):
            return MasteryLevel.LEARNING
        return MasteryLevel.MASTERED

    def regress(self) -> MasteryLevel:
        if self is MasteryLevel.MASTERED:
            return MasteryLevel.LEARNING
        return self

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.title()

    @property
    def color(self) -> str:
        """Rich color for CLI display."""
        return {
            MasteryLevel.NEW: "dim",
            MasteryLevel.SEEN: "cyan",
            MasteryLevel.LEARNING: "yellow",
            MasteryLevel.MASTERED: "green",
        }[self]


class StudyItem(BaseModel):
    """An atomic unit of knowledge from the corpus."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    id: str = Field(min_length=1)
    term: str
    definition: str = ""
    kind: ItemKind = ItemKind.CONCEPT
    language: str = ""
    project: str = ""
    category: str = Field(min_length=1)

    what_it_is: str = NOT_SPECIFIED
    why_it_exists: str = NOT_SPECIFIED
    where_it_runs: str = NOT_SPECIFIED
    what_it_touches: str = NOT_SPECIFIED
    what_breaks: str = NOT_SPECIFIED
    project_usage: str = NOT_SPECIFIED
    common_confusion: str = NOT_SPECIFIED

    @property
    def projects(self) -> list[str]:
        """Individual project names from the comma-joined project field."""
        return [p.strip() for p in self.project.split(",") if p.strip()]


@dataclass
class Lesson:
    """A chunk of up to five same-category items within a module."""

    id: str
    module_id: str
    title: str
    description: str
    items: list[StudyItem]
    order: int

    @property
    def item_ids(self) -> list[str]:
        return [item.id for item in self.items]


@dataclass
class Module:
    """A thematic partition of the corpus with its derived lessons."""

    id: str
    title: str
    description: str
    icon: str
    color: str
    categories: list[str]
    items: list[StudyItem] = field(default_factory=list)
    lessons: list[Lesson] = field(default_factory=list)


class QuestionType(str, Enum):
    """Generated quiz question types."""

    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"


@dataclass
class QuizQuestion:
    """A generated quiz question. Never persisted."""

    id: str
    type: QuestionType
    question: str
    correct_answer: int | bool
    explanation: str
    item_id: str
    options: list[str] | None = None


@dataclass
class ItemResult:
    """Outcome of one answered question, keyed by its source item."""

    item_id: str
    correct: bool


class UserProgress(BaseModel):
    """
    The learner's accumulated state.

    Only the transition functions in src.progress.engine produce new
    snapshots; callers never edit fields directly. Missing keys in a stored
    snapshot fall back to these defaults.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    xp: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)
    last_study_date: str = ""
    completed_lessons: list[str] = Field(default_factory=list)
    item_mastery: dict[str, MasteryLevel] = Field(default_factory=dict)
    quiz_high_scores: dict[str, int] = Field(default_factory=dict)
    achievements: list[str] = Field(default_factory=list)
    total_items_studied: int = Field(default=0, ge=0)
    total_quizzes_taken: int = Field(default=0, ge=0)
    total_correct_answers: int = Field(default=0, ge=0)
