"""Code Learner: lessons, quizzes and progress tracking over a study-item corpus."""

__version__ = "0.1.0"
