from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from quizgenius.ai.providers.base import AIModel
from quizgenius.api.deps import get_model
from quizgenius.api.models import ErrorResponse, QuizRequest
from quizgenius.config import Settings, get_settings
from quizgenius.schema.quiz import QuizItem
from quizgenius.services.generation import generate_quiz
from quizgenius.services.request_validation import _resolve_question_count

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}}


def _parse_quiz_request(request: Request) -> QuizRequest:
  """Read quiz parameters from the query string using their wire names."""
  try:
    return QuizRequest.model_validate(dict(request.query_params))
  except ValidationError as exc:
    # Route query errors through the same 422 handler as body errors.
    raise RequestValidationError(exc.errors()) from exc


@router.get("", response_model=list[QuizItem], responses=_ERROR_RESPONSES)
async def get_quizzes(quiz_request: QuizRequest = Depends(_parse_quiz_request), model: AIModel = Depends(get_model), settings: Settings = Depends(get_settings)) -> list[QuizItem]:  # noqa: B008
  """Generate a quiz for the requested subject and return its items."""
  question_count = _resolve_question_count(quiz_request, settings)
  items = await generate_quiz(model, quiz_request, question_count=question_count, settings=settings)
  logger.info("Quiz generated subject=%s items=%d", quiz_request.subject, len(items))
  return items
