"""Request and response models for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class QuizRequest(BaseModel):
  """Query parameters for quiz generation."""

  # Unknown query parameters (cache busters, tracking) are ignored rather than rejected.
  model_config = ConfigDict(populate_by_name=True, extra="ignore")

  subject: StrictStr = Field(alias="selectedSubject", max_length=200)
  topic: StrictStr = Field(default="", alias="selectedTopic", max_length=200)
  sub_topic: StrictStr = Field(default="", alias="subTopics", max_length=200)
  question_count: int | None = Field(default=None, alias="numOfQuestions", ge=1)
  difficulty: StrictStr = Field(default="Intermediate", alias="levelOfQuestions", max_length=50)

  @field_validator("subject", "difficulty")
  @classmethod
  def require_text(cls, value: str) -> str:
    if not value.strip():
      raise ValueError("must not be blank")
    return value.strip()

  @field_validator("topic", "sub_topic")
  @classmethod
  def strip_text(cls, value: str) -> str:
    return value.strip()


class LessonRequest(BaseModel):
  """Request body for lesson generation."""

  model_config = ConfigDict(populate_by_name=True, extra="forbid")

  subject: StrictStr = Field(alias="selectedSubject", max_length=200)
  topic: StrictStr = Field(default="", alias="topics", max_length=200)
  sub_topic: StrictStr = Field(default="", alias="subTopics", max_length=200)
  difficulty: StrictStr | None = Field(default=None, alias="levelOfQuestions", max_length=50)

  @field_validator("subject")
  @classmethod
  def require_subject(cls, value: str) -> str:
    if not value.strip():
      raise ValueError("must not be blank")
    return value.strip()

  @field_validator("topic", "sub_topic")
  @classmethod
  def strip_text(cls, value: str) -> str:
    return value.strip()


class LessonCreatedResponse(BaseModel):
  """Acknowledgement returned after a lesson is generated and stored."""

  model_config = ConfigDict(populate_by_name=True)

  acknowledged: bool = True
  inserted_id: str = Field(alias="insertedId")


class ErrorResponse(BaseModel):
  """Generic error body; never carries model output."""

  message: str
