"""Curriculum: thematic modules and fixed-size lessons built from the corpus."""

from .builder import (
    LESSON_SIZE,
    build_modules,
    create_lessons,
    find_lesson,
    find_module,
    module_completion,
    quizzable_modules,
)
from .module_defs import FALLBACK_MODULE, MODULE_DEFS, ModuleDef

__all__ = [
    "LESSON_SIZE",
    "build_modules",
    "create_lessons",
    "find_lesson",
    "find_module",
    "module_completion",
    "quizzable_modules",
    "ModuleDef",
    "MODULE_DEFS",
    "FALLBACK_MODULE",
]
