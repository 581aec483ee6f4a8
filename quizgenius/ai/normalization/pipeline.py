"""Fixed-order recovery pipeline that turns raw model text into a typed result."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from quizgenius.ai.errors import SchemaValidationError, StructuredParseError
from quizgenius.schema.lesson import LessonDocument
from quizgenius.schema.quiz import QuizItem
from quizgenius.schema.validate import validate_lesson, validate_quiz_list

from .fences import strip_fences
from .parser import parse_structured
from .repair import recover_truncation, repair_trailing_commas
from .symbols import normalize_symbols
from .whitespace import collapse_whitespace

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
  """Stages that can terminate a pipeline run."""

  PARSE = "parse"
  VALIDATE = "validate"


class OutputKind(str, Enum):
  """Target schema selector for a pipeline run."""

  QUIZ = "quiz"
  LESSON = "lesson"


@dataclass(frozen=True)
class Recovered:
  """Model output that decoded and matched its schema."""

  value: list[QuizItem] | LessonDocument


@dataclass(frozen=True)
class Unrecoverable:
  """Model output that could not be recovered, with the original text kept for diagnostics."""

  stage: PipelineStage
  message: str
  raw_text: str = field(repr=False)


PipelineResult = Recovered | Unrecoverable

# Text steps run in this order; each is a pure str -> str function.
TEXT_STEPS: Final[tuple[tuple[str, Callable[[str], str]], ...]] = (
  ("normalize_symbols", normalize_symbols),
  ("strip_fences", strip_fences),
  ("collapse_whitespace", collapse_whitespace),
  ("repair_trailing_commas", repair_trailing_commas),
  ("recover_truncation", recover_truncation),
)

_VALIDATORS: Final[dict[OutputKind, Callable[[Any], list[QuizItem] | LessonDocument]]] = {
  OutputKind.QUIZ: validate_quiz_list,
  OutputKind.LESSON: validate_lesson,
}


def prepare_text(raw_text: str) -> str:
  """Apply every text repair step to the raw model output."""
  text = raw_text
  for name, step in TEXT_STEPS:
    repaired = step(text)
    # Record which repairs were needed so prompt regressions show up in debug logs.
    if repaired != text:
      logger.debug("Normalization step %s changed model output (%d -> %d chars)", name, len(text), len(repaired))
    text = repaired
  return text


def normalize_output(raw_text: str, kind: OutputKind) -> PipelineResult:
  """Run the full pipeline for the selected schema."""
  text = prepare_text(raw_text)

  try:
    value = parse_structured(text, raw_text=raw_text)
  except StructuredParseError as exc:
    return Unrecoverable(stage=PipelineStage.PARSE, message=exc.message, raw_text=raw_text)

  try:
    validated = _VALIDATORS[kind](value)
  except SchemaValidationError as exc:
    return Unrecoverable(stage=PipelineStage.VALIDATE, message=str(exc), raw_text=raw_text)

  return Recovered(value=validated)


def normalize_quiz_output(raw_text: str) -> PipelineResult:
  """Recover a quiz item list from raw model output."""
  return normalize_output(raw_text, OutputKind.QUIZ)


def normalize_lesson_output(raw_text: str) -> PipelineResult:
  """Recover a lesson document from raw model output."""
  return normalize_output(raw_text, OutputKind.LESSON)
