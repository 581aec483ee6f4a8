"""QuizGenius engine: quiz and lesson generation with model-output recovery."""

__version__ = "0.1.0"
