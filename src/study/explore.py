"""
Explore mode: free-form search and filtering over the corpus.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.core.models import StudyItem


@dataclass(frozen=True)
class ItemFilter:
    """Explore filters; empty strings mean "any"."""

    search: str = ""
    kind: str = ""
    project: str = ""
    category: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.search or self.kind or self.project or self.category)


@dataclass(frozen=True)
class FilterOptions:
    """Distinct values available for each filter."""

    kinds: list[str]
    projects: list[str]
    categories: list[str]


def _matches(item: StudyItem, item_filter: ItemFilter, use_category: bool = True) -> bool:
    query = item_filter.search.lower()
    if query and not (
        query in item.term.lower()
        or query in item.definition.lower()
        or query in item.category.lower()
    ):
        return False
    if item_filter.kind and item.kind.value != item_filter.kind:
        return False
    if item_filter.project and item_filter.project.lower() not in item.project.lower():
        return False
    if use_category and item_filter.category and item.category != item_filter.category:
        return False
    return True


def filter_items(items: Sequence[StudyItem], item_filter: ItemFilter) -> list[StudyItem]:
    """
    Items matching every active filter, in corpus order.

    search matches term, definition or category case-insensitively; project
    is a case-insensitive substring of the comma-joined project field; kind
    and category must match exactly.
    """
    return [item for item in items if _matches(item, item_filter)]


def visible_categories(items: Sequence[StudyItem], item_filter: ItemFilter) -> list[str]:
    """Sorted categories still reachable under every filter except category."""
    return sorted({item.category for item in items if _matches(item, item_filter, use_category=False)})


def filter_options(items: Iterable[StudyItem]) -> FilterOptions:
    """Sorted kinds, individual project names and categories in the corpus."""
    kinds: set[str] = set()
    projects: set[str] = set()
    categories: set[str] = set()
    for item in items:
        kinds.add(item.kind.value)
        projects.update(item.projects)
        categories.add(item.category)
    return FilterOptions(kinds=sorted(kinds), projects=sorted(projects), categories=sorted(categories))
