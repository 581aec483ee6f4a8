from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from quizgenius.ai.providers.base import AIModel
from quizgenius.api.deps import get_lessons_repo, get_model
from quizgenius.api.models import ErrorResponse, LessonCreatedResponse, LessonRequest
from quizgenius.config import Settings, get_settings
from quizgenius.services.generation import generate_lesson
from quizgenius.services.request_validation import _resolve_page
from quizgenius.storage.lessons_repo import LessonsRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=LessonCreatedResponse, responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}})
async def create_lesson(request: LessonRequest, model: AIModel = Depends(get_model), repo: LessonsRepository = Depends(get_lessons_repo), settings: Settings = Depends(get_settings)) -> LessonCreatedResponse:  # noqa: B008
  """Generate a lesson, store it, and return the new identifier."""
  lesson = await generate_lesson(model, request, settings=settings)
  record = await repo.insert(lesson)
  logger.info("Lesson stored lesson_id=%s title=%s", record.lesson_id, lesson.title)
  return LessonCreatedResponse(inserted_id=record.lesson_id)


@router.get("")
async def list_lessons(limit: int = 20, offset: int = 0, repo: LessonsRepository = Depends(get_lessons_repo)) -> list[dict[str, Any]]:  # noqa: B008
  """Return stored lessons in insertion order."""
  limit, offset = _resolve_page(limit, offset)
  records = await repo.list_lessons(limit=limit, offset=offset)
  return [record.to_document() for record in records]


@router.get("/{lesson_id}", responses={404: {"model": ErrorResponse}})
async def get_lesson(lesson_id: str, repo: LessonsRepository = Depends(get_lessons_repo)) -> dict[str, Any]:  # noqa: B008
  """Return a single stored lesson."""
  record = await repo.get(lesson_id)
  if record is None:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found.")
  return record.to_document()
