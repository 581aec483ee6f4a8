"""Shared FastAPI dependencies for the generation model and lesson store."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from quizgenius.ai.providers.base import AIModel
from quizgenius.ai.providers.factory import build_model
from quizgenius.config import Settings, get_settings
from quizgenius.storage.lessons_repo import InMemoryLessonsRepository, LessonsRepository


@lru_cache(maxsize=1)
def _cached_model(settings: Settings) -> AIModel:
  return build_model(settings)


def get_model(settings: Settings = Depends(get_settings)) -> AIModel:  # noqa: B008
  """Return the process-wide generation model client."""
  return _cached_model(settings)


def get_lessons_repo(request: Request) -> LessonsRepository:
  """Return the lesson store attached to the application state."""
  repo = getattr(request.app.state, "lessons_repo", None)
  # Lifespan normally installs the store; create it lazily when the app runs without lifespan.
  if repo is None:
    repo = InMemoryLessonsRepository()
    request.app.state.lessons_repo = repo
  return repo
