"""Validation entrypoints that report the first schema violation with its path."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from quizgenius.ai.errors import SchemaValidationError

from .lesson import LessonDocument
from .quiz import QuizItem

QUIZ_ROOT = "items"
LESSON_ROOT = "lesson"

_quiz_list_adapter = TypeAdapter(list[QuizItem])


def validate_quiz_list(value: Any) -> list[QuizItem]:
  """Validate a decoded value as a quiz item list; list length is not enforced."""
  try:
    return _quiz_list_adapter.validate_python(value)
  except ValidationError as exc:
    raise _first_violation(exc, root=QUIZ_ROOT) from exc


def validate_lesson(value: Any) -> LessonDocument:
  """Validate a decoded value as a lesson document."""
  try:
    return LessonDocument.model_validate(value)
  except ValidationError as exc:
    raise _first_violation(exc, root=LESSON_ROOT) from exc


def format_error_path(root: str, loc: Sequence[int | str]) -> str:
  """Render a pydantic location tuple as `items[2].correctAnswer`."""
  parts = [root]
  for segment in loc:
    if isinstance(segment, int):
      parts.append(f"[{segment}]")
    else:
      parts.append(f".{segment}")
  return "".join(parts)


def _first_violation(exc: ValidationError, *, root: str) -> SchemaValidationError:
  # Pydantic reports errors in traversal order, so the first entry is the first violation encountered.
  error = exc.errors(include_url=False)[0]
  reason = str(error["msg"]).removeprefix("Value error, ")
  return SchemaValidationError(format_error_path(root, error["loc"]), reason)
