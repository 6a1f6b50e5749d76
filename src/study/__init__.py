"""
Study Module.

Provides services for:
- Curriculum navigation and lesson completion
- Module quizzes with progress and achievement updates
- Explore mode (search and filters)
- Learning mode (shuffled flash-card deck)
"""

from src.study.explore import FilterOptions, ItemFilter, filter_items, filter_options, visible_categories
from src.study.learning import LearningSession
from src.study.study_service import DashboardStats, StudyService

__all__ = [
    "StudyService",
    "DashboardStats",
    "LearningSession",
    "ItemFilter",
    "FilterOptions",
    "filter_items",
    "filter_options",
    "visible_categories",
]
