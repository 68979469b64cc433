"""Mental arithmetic quiz system: question bank, student scores, quizzes and a console."""

__version__ = "0.1.0"
__all__ = ["__version__"]