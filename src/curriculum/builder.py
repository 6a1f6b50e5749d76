"""
Curriculum Builder.

Partitions the item corpus into modules and each module into lessons.

The algorithm:
1. Walk MODULE_DEFS in declaration order; each claims the not-yet-claimed
   items whose category it lists (first match wins)
2. Leftover items go to the "More Topics" fallback module
3. Within a module, group items by category in first-seen order and cut
   each group into lessons of LESSON_SIZE
4. Drop modules that claimed nothing

Everything here is a pure function of the input order, so lesson ids stay
stable across runs and persisted progress keeps pointing at the same lessons.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from src.core.exceptions import UnknownLessonError, UnknownModuleError
from src.core.models import Lesson, Module, StudyItem
from src.curriculum.module_defs import FALLBACK_MODULE, MODULE_DEFS, ModuleDef

LESSON_SIZE = 5


def create_lessons(module_id: str, items: Sequence[StudyItem]) -> list[Lesson]:
    """
    Cut a module's items into category-grouped lessons.

    Args:
        module_id: Owning module id (prefix of every lesson id)
        items: The module's items in corpus order

    Returns:
        Lessons in order; ids are "<module_id>-lesson-<n>"
    """
    # dict keeps insertion order, which is the first-seen category order
    groups: dict[str, list[StudyItem]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)

    lessons: list[Lesson] = []
    order = 0
    for category, category_items in groups.items():
        multipart = len(category_items) > LESSON_SIZE
        for start in range(0, len(category_items), LESSON_SIZE):
            chunk = category_items[start : start + LESSON_SIZE]
            suffix = f" (Part {start // LESSON_SIZE + 1})" if multipart else ""
            lessons.append(
                Lesson(
                    id=f"{module_id}-lesson-{order}",
                    module_id=module_id,
                    title=f"{category}{suffix}",
                    description=", ".join(item.term for item in chunk),
                    items=chunk,
                    order=order,
                )
            )
            order += 1

    return lessons


def _make_module(definition: ModuleDef, items: list[StudyItem], categories: list[str]) -> Module:
    return Module(
        id=definition.id,
        title=definition.title,
        description=definition.description,
        icon=definition.icon,
        color=definition.color,
        categories=categories,
        items=items,
        lessons=create_lessons(definition.id, items),
    )


def build_modules(
    items: Sequence[StudyItem],
    definitions: Sequence[ModuleDef] = MODULE_DEFS,
) -> list[Module]:
    """
    Build the curriculum from the corpus.

    Args:
        items: Full corpus in its canonical order
        definitions: Module templates, highest priority first

    Returns:
        Non-empty modules; every item appears in exactly one of them
    """
    claimed: set[str] = set()
    modules: list[Module] = []

    for definition in definitions:
        patterns = set(definition.category_patterns)
        module_items = []
        for item in items:
            if item.id in claimed or item.category not in patterns:
                continue
            claimed.add(item.id)
            module_items.append(item)
        modules.append(_make_module(definition, module_items, list(definition.category_patterns)))

    unclaimed = [item for item in items if item.id not in claimed]
    if unclaimed:
        categories = list(dict.fromkeys(item.category for item in unclaimed))
        modules.append(_make_module(FALLBACK_MODULE, unclaimed, categories))
        logger.debug(f"{len(unclaimed)} items fell through to '{FALLBACK_MODULE.id}'")

    modules = [module for module in modules if module.items]
    logger.debug(
        f"Built {len(modules)} modules, "
        f"{sum(len(m.lessons) for m in modules)} lessons from {len(items)} items"
    )
    return modules


def find_module(modules: Iterable[Module], module_id: str) -> Module:
    """Look up a module by id; raises UnknownModuleError."""
    for module in modules:
        if module.id == module_id:
            return module
    raise UnknownModuleError(module_id)


def find_lesson(modules: Iterable[Module], lesson_id: str) -> Lesson:
    """Look up a lesson by id across all modules; raises UnknownLessonError."""
    for module in modules:
        for lesson in module.lessons:
            if lesson.id == lesson_id:
                return lesson
    raise UnknownLessonError(lesson_id)


def module_completion(module: Module, completed_lessons: Iterable[str]) -> tuple[int, int, int]:
    """
    Lesson completion for a module.

    Returns:
        Tuple of (completed, total, percent) with percent rounded to int
    """
    done_ids = set(completed_lessons)
    total = len(module.lessons)
    done = sum(1 for lesson in module.lessons if lesson.id in done_ids)
    percent = round(done / total * 100) if total else 0
    return done, total, percent


def quizzable_modules(modules: Iterable[Module], min_items: int = 4) -> list[Module]:
    """Modules with enough items to build a meaningful quiz."""
    return [module for module in modules if len(module.items) >= min_items]
