"""Quiz and lesson generation: prompt, call the model, recover its output."""

from __future__ import annotations

import logging
from typing import cast

from quizgenius.ai.backoff import retry_with_backoff
from quizgenius.ai.errors import GenerationOutputError
from quizgenius.ai.normalization import OutputKind, PipelineResult, Recovered, normalize_lesson_output, normalize_quiz_output
from quizgenius.ai.prompts import build_lesson_prompt, build_quiz_prompt
from quizgenius.ai.providers.base import AIModel
from quizgenius.api.models import LessonRequest, QuizRequest
from quizgenius.config import Settings
from quizgenius.schema.lesson import LessonDocument
from quizgenius.schema.quiz import QuizItem

logger = logging.getLogger(__name__)


async def generate_quiz(model: AIModel, request: QuizRequest, *, question_count: int, settings: Settings) -> list[QuizItem]:
  """Generate a quiz and return its recovered items."""
  prompt = build_quiz_prompt(request.subject, request.topic, request.sub_topic, request.difficulty, question_count)
  logger.info("Requesting quiz generation subject=%s topic=%s questions=%d model=%s", request.subject, request.topic or "-", question_count, model.name)
  # Only the upstream call is retried; recovery of whatever text comes back is deterministic.
  response = await retry_with_backoff(model.generate, prompt, delays=settings.generation_retry_delays)
  items = cast(list[QuizItem], _unwrap(normalize_quiz_output(response.content), OutputKind.QUIZ))

  # Under- or over-production is accepted; it is logged so prompt quality can be tracked.
  if len(items) != question_count:
    logger.info("Quiz item count mismatch requested=%d recovered=%d", question_count, len(items))

  return items


async def generate_lesson(model: AIModel, request: LessonRequest, *, settings: Settings) -> LessonDocument:
  """Generate a lesson and return the recovered document."""
  prompt = build_lesson_prompt(request.subject, request.topic, request.sub_topic, request.difficulty)
  logger.info("Requesting lesson generation subject=%s topic=%s model=%s", request.subject, request.topic or "-", model.name)
  response = await retry_with_backoff(model.generate, prompt, delays=settings.generation_retry_delays)
  return cast(LessonDocument, _unwrap(normalize_lesson_output(response.content), OutputKind.LESSON))


def _unwrap(result: PipelineResult, kind: OutputKind) -> list[QuizItem] | LessonDocument:
  """Return the recovered value or raise GenerationOutputError after logging diagnostics."""
  if isinstance(result, Recovered):
    return result.value

  logger.warning("Unrecoverable %s output stage=%s message=%s", kind.value, result.stage.value, result.message)
  # Raw output can be large and partially structured, so it only goes to debug logs.
  logger.debug("Raw %s model output:\n%s", kind.value, result.raw_text)
  raise GenerationOutputError(result)
