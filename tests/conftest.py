"""Shared fixtures for quiz and lesson generation tests."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from quizgenius.ai.providers.base import AIModel, ModelResponse
from quizgenius.api.deps import get_lessons_repo, get_model
from quizgenius.config import Settings, get_settings
from quizgenius.main import app
from quizgenius.storage.lessons_repo import InMemoryLessonsRepository


class FakeModel(AIModel):
  """Scripted model that returns queued outputs or raises queued errors in order."""

  provider = "fake"

  def __init__(self, *outputs: str | BaseException, name: str = "fake-model") -> None:
    self.name = name
    self._outputs = list(outputs)
    self.prompts: list[str] = []

  def queue(self, *outputs: str | BaseException) -> None:
    self._outputs.extend(outputs)

  async def generate(self, prompt: str) -> ModelResponse:
    self.prompts.append(prompt)
    if not self._outputs:
      raise AssertionError("FakeModel received more calls than scripted outputs")
    output = self._outputs.pop(0)
    if isinstance(output, BaseException):
      raise output
    return ModelResponse(content=output)


@pytest.fixture
def anyio_backend() -> str:
  return "asyncio"


@pytest.fixture
def settings() -> Settings:
  # Retries run back to back so transient-failure tests stay fast.
  return dataclasses.replace(get_settings(), generation_retry_delays=(0.0, 0.0))


@pytest.fixture
def fake_model() -> FakeModel:
  return FakeModel()


@pytest.fixture
def lessons_repo() -> InMemoryLessonsRepository:
  return InMemoryLessonsRepository()


@pytest.fixture
def client(fake_model: FakeModel, lessons_repo: InMemoryLessonsRepository, settings: Settings) -> Iterator[TestClient]:
  app.dependency_overrides[get_settings] = lambda: settings
  app.dependency_overrides[get_model] = lambda: fake_model
  app.dependency_overrides[get_lessons_repo] = lambda: lessons_repo
  with TestClient(app, raise_server_exceptions=False) as test_client:
    yield test_client
  app.dependency_overrides.clear()
