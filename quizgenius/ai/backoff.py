"""Caller-side retry for transient generation failures."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from quizgenius.ai.errors import UpstreamCallError

T = TypeVar("T")
logger = logging.getLogger(__name__)


async def retry_with_backoff(func: Callable[..., Awaitable[T]], *args: Any, delays: Sequence[float] = (1.0, 4.0), **kwargs: Any) -> T:
  """
  Execute an upstream call, retrying only transient UpstreamCallErrors.

  Each entry in `delays` is one retry preceded by that many seconds of sleep.
  Non-transient failures and every other exception propagate immediately.
  """
  for attempt, delay in enumerate(delays):
    try:
      return await func(*args, **kwargs)
    except UpstreamCallError as exc:
      if not exc.transient:
        raise

      logger.warning("Retry attempt %d/%d needed provider=%s error=%s; retrying in %.1fs", attempt + 1, len(delays), exc.provider, exc, delay)
      await asyncio.sleep(delay)

  # Final attempt
  return await func(*args, **kwargs)
