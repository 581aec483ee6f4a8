"""Lesson document schema produced by the lesson generation flow."""

from __future__ import annotations

from pydantic import Field

from .fields import NonBlankStr, WireModel


class SubSection(WireModel):
  """Nested lesson subsection."""

  heading: NonBlankStr
  content: NonBlankStr


class Section(WireModel):
  """Top-level lesson section with optional subsections."""

  heading: NonBlankStr
  content: NonBlankStr
  sub_sections: list[SubSection] = Field(default_factory=list, alias="subSections")


class LessonDocument(WireModel):
  """Structured lesson returned by the generation model."""

  title: NonBlankStr
  subject: NonBlankStr
  topic: NonBlankStr
  introduction: NonBlankStr
  objectives: list[NonBlankStr]
  sections: list[Section]
  conclusion: NonBlankStr
