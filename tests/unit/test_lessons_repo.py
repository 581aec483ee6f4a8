"""Unit tests for the in-memory lesson store."""

from __future__ import annotations

import pytest

from quizgenius.schema import LessonDocument
from quizgenius.storage.lessons_repo import InMemoryLessonsRepository, LessonRecord


def _lesson(title: str) -> LessonDocument:
  return LessonDocument.model_validate(
    {
      "title": title,
      "subject": "Chemistry",
      "topic": "Atoms",
      "introduction": "Everything is made of atoms.",
      "objectives": ["Describe an atom"],
      "sections": [{"heading": "Structure", "content": "Protons, neutrons and electrons.", "subSections": [{"heading": "Nucleus", "content": "Dense core."}]}],
      "conclusion": "Atoms build molecules.",
    }
  )


@pytest.mark.anyio
async def test_insert_and_get_round_trip() -> None:
  """Inserted lessons can be fetched by identifier."""
  repo = InMemoryLessonsRepository()
  record = await repo.insert(_lesson("Atoms 101"))
  fetched = await repo.get(record.lesson_id)
  assert fetched == record
  assert await repo.get("missing") is None


@pytest.mark.anyio
async def test_list_lessons_pages_in_insertion_order() -> None:
  """Listing honors limit and offset in insertion order."""
  repo = InMemoryLessonsRepository()
  for index in range(5):
    await repo.insert(_lesson(f"Lesson {index}"))
  page = await repo.list_lessons(limit=2, offset=1)
  assert [record.lesson.title for record in page] == ["Lesson 1", "Lesson 2"]
  assert await repo.list_lessons(limit=10, offset=5) == []


def test_to_document_uses_wire_names() -> None:
  """Stored documents use camelCase keys plus storage metadata."""
  record = LessonRecord(lesson_id="abc", created_at="2024-01-01T00:00:00Z", lesson=_lesson("Atoms"))
  document = record.to_document()
  assert document["_id"] == "abc"
  assert document["createdAt"] == "2024-01-01T00:00:00Z"
  assert document["sections"][0]["subSections"][0]["heading"] == "Nucleus"
