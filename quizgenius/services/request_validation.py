from fastapi import HTTPException, status

from quizgenius.api.models import QuizRequest
from quizgenius.config import Settings


def _resolve_question_count(request: QuizRequest, settings: Settings) -> int:
  """Apply the configured default and upper bound to the requested question count."""
  if request.question_count is None:
    return settings.default_question_count
  if request.question_count > settings.max_question_count:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"numOfQuestions exceeds the maximum of {settings.max_question_count}.")
  return request.question_count


def _resolve_page(limit: int, offset: int, *, max_limit: int = 100) -> tuple[int, int]:
  """Validate pagination parameters for lesson listing."""
  if limit <= 0 or limit > max_limit:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"limit must be between 1 and {max_limit}.")
  if offset < 0:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="offset must be zero or positive.")
  return limit, offset
