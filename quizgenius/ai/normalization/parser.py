"""Strict structural decoding of repaired model output."""

from __future__ import annotations

import re
from typing import Any

import msgspec

from quizgenius.ai.errors import StructuredParseError

_BYTE_OFFSET_RE = re.compile(r"\(byte (\d+)\)")

_decoder = msgspec.json.Decoder()


def parse_structured(text: str, *, raw_text: str) -> Any:
  """
  Decode text into plain dicts, lists, strings, numbers, booleans and None.

  Decoding is all-or-nothing: any syntax error, trailing data, non-standard constant
  (NaN, Infinity) or runaway nesting raises StructuredParseError carrying the pre-repair
  raw text.
  """
  if not text.strip():
    raise StructuredParseError("Model output is empty after normalization.", raw_text=raw_text, position=0)

  try:
    return _decoder.decode(text)
  except msgspec.DecodeError as exc:
    message = str(exc)
    match = _BYTE_OFFSET_RE.search(message)
    position = int(match.group(1)) if match else None
    raise StructuredParseError(f"Invalid JSON payload: {message}", raw_text=raw_text, position=position) from exc
  except RecursionError as exc:
    # Pathologically nested output exhausts the decoder stack; it is still just unusable text.
    raise StructuredParseError("Invalid JSON payload: nesting is too deep to decode.", raw_text=raw_text) from exc
