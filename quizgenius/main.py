from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException

from quizgenius import __version__
from quizgenius.ai.errors import GenerationOutputError, UpstreamCallError
from quizgenius.api.routes import lessons, quizzes
from quizgenius.config import get_settings
from quizgenius.core.exceptions import generation_output_exception_handler, global_exception_handler, http_exception_handler, request_validation_exception_handler, upstream_call_exception_handler
from quizgenius.core.lifespan import lifespan

settings = get_settings()

app = FastAPI(title="QuizGenius", version=__version__, lifespan=lifespan)

app.add_middleware(CORSMiddleware, allow_origins=settings.allowed_origins, allow_credentials=True, allow_methods=["GET", "POST", "OPTIONS"], allow_headers=["content-type"])


# Add exception handlers
app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(GenerationOutputError, generation_output_exception_handler)
app.add_exception_handler(UpstreamCallError, upstream_call_exception_handler)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
  """Return a plain liveness banner."""
  return "Quiz Server is running"


@app.get("/health", include_in_schema=False)
async def health_check() -> dict[str, str]:
  """Return a simple health status."""
  return {"status": "ok", "version": __version__}


app.include_router(quizzes.router, prefix="/quizzes", tags=["quizzes"])
app.include_router(lessons.router, prefix="/lessons", tags=["lessons"])
