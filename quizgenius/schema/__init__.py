"""Schema package exports."""

from .lesson import LessonDocument, Section, SubSection
from .quiz import OPTION_COUNT, QuizItem
from .validate import validate_lesson, validate_quiz_list

__all__ = ["LessonDocument", "OPTION_COUNT", "QuizItem", "Section", "SubSection", "validate_lesson", "validate_quiz_list"]
