import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from quizgenius.core.logging import _initialize_logging
from quizgenius.storage.lessons_repo import InMemoryLessonsRepository


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
  """Set up logging and the lesson store once uvicorn starts."""
  from quizgenius.config import get_settings

  # Load settings for startup initialization.
  settings = get_settings()
  logger = logging.getLogger("quizgenius.core.lifespan")

  _initialize_logging(settings)
  # Keep a store supplied by the embedding process (tests, scripts); default to process memory.
  if getattr(app.state, "lessons_repo", None) is None:
    app.state.lessons_repo = InMemoryLessonsRepository()

  if not settings.gemini_api_key:
    logger.warning("GEMINI_API_KEY is not set; generation endpoints will fail until it is configured.")

  logger.info("Startup complete environment=%s model=%s", settings.environment, settings.gemini_model)
  yield
