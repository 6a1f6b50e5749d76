"""Exception hierarchy for code-learner."""

from __future__ import annotations


class CodeLearnerError(Exception):
    """Base class for all application errors."""


class CorpusError(CodeLearnerError):
    """The study item corpus could not be read or validated."""


class UnknownModuleError(CodeLearnerError, LookupError):
    """No module with the requested id exists in the curriculum."""

    def __init__(self, module_id: str):
        super().__init__(f"Unknown module: {module_id}")
        self.module_id = module_id


class UnknownLessonError(CodeLearnerError, LookupError):
    """No lesson with the requested id exists in the curriculum."""

    def __init__(self, lesson_id: str):
        super().__init__(f"Unknown lesson: {lesson_id}")
        self.lesson_id = lesson_id
