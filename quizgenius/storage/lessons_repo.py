"""Storage interfaces and records for lesson persistence."""

from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Protocol

from quizgenius.schema.lesson import LessonDocument

_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class LessonRecord:
  """Record stored in the lessons repository."""

  lesson_id: str
  created_at: str
  lesson: LessonDocument

  def to_document(self) -> dict[str, Any]:
    """Return the stored lesson in its wire shape with storage metadata."""
    document = self.lesson.model_dump(mode="json", by_alias=True)
    document["_id"] = self.lesson_id
    document["createdAt"] = self.created_at
    return document


class LessonsRepository(Protocol):
  """Repository contract for lesson persistence."""

  async def insert(self, lesson: LessonDocument) -> LessonRecord:
    """Persist a recovered lesson and return its record."""

  async def list_lessons(self, *, limit: int, offset: int) -> list[LessonRecord]:
    """Return stored lessons in insertion order."""

  async def get(self, lesson_id: str) -> LessonRecord | None:
    """Return a single lesson record or None."""


class InMemoryLessonsRepository:
  """Process-local lesson store used for development and tests."""

  def __init__(self) -> None:
    self._records: dict[str, LessonRecord] = {}
    self._lock = asyncio.Lock()

  async def insert(self, lesson: LessonDocument) -> LessonRecord:
    record = LessonRecord(lesson_id=uuid.uuid4().hex, created_at=datetime.now(UTC).strftime(_DATE_FORMAT), lesson=lesson)
    async with self._lock:
      self._records[record.lesson_id] = record
    return record

  async def list_lessons(self, *, limit: int, offset: int) -> list[LessonRecord]:
    async with self._lock:
      records = list(self._records.values())
    return records[offset : offset + limit]

  async def get(self, lesson_id: str) -> LessonRecord | None:
    async with self._lock:
      return self._records.get(lesson_id)
