"""Syntax repair and truncation recovery for near-JSON model output."""

from __future__ import annotations

from collections.abc import Iterator

_CLOSERS = "}]"
_WHITESPACE = " \t\r\n"


def repair_trailing_commas(text: str) -> str:
  """Remove commas that directly precede a closing brace or bracket outside string literals."""
  # One pass can expose another match (`[1,,]`), so repeat until the text is stable.
  while True:
    repaired = _drop_trailing_commas(text)
    if repaired == text:
      return repaired

    text = repaired


def _drop_trailing_commas(text: str) -> str:
  parts: list[str] = []
  index = 0
  for position, char in _structural_chars(text):
    if char != ",":
      continue

    lookahead = position + 1
    while lookahead < len(text) and text[lookahead] in _WHITESPACE:
      lookahead += 1

    # The comma and the whitespace after it go; the closer stays.
    if lookahead < len(text) and text[lookahead] in _CLOSERS:
      parts.append(text[index:position])
      index = lookahead

  parts.append(text[index:])
  return "".join(parts)


def recover_truncation(text: str) -> str:
  """
  Trim a cut-off payload back to its last complete element and re-close the outer array.

  Text without any closing delimiter is returned unchanged so the parser reports it.
  Object payloads (lessons) only lose trailing text after the brace that closes the root.
  The cut follows nesting depth rather than the last `}` or `]` in the text, so closers
  inside nested elements, strings or trailing prose never move it.
  """
  if "}" not in text and "]" not in text:
    return text

  start = _first_container_index(text)
  if start is None:
    return text

  boundary = _last_complete_element_end(text, start)
  if boundary is None:
    return text

  cut, closed = boundary
  if closed:
    return text[:cut]

  # An unclosed object has no element boundary worth re-closing; the parser reports it.
  if text[start] == "{":
    return text

  return text[:cut] + "]"


def _first_container_index(text: str) -> int | None:
  """Return the index of the first object or array opener."""
  for index, char in enumerate(text):
    if char in "{[":
      return index

  return None


def _structural_chars(text: str, start: int = 0) -> Iterator[tuple[int, str]]:
  """Yield characters that sit outside string literals, with their offsets."""
  in_string = False
  escape = False

  # Walk the text while honoring string escapes so quoted delimiters are ignored.
  for index in range(start, len(text)):
    char = text[index]

    if in_string:
      if escape:
        escape = False
      elif char == "\\":
        escape = True
      elif char == '"':
        in_string = False
      continue

    if char == '"':
      in_string = True
      continue

    yield index, char


def _last_complete_element_end(text: str, start: int) -> tuple[int, bool] | None:
  """Return the offset just past the root container or its last fully closed child, and whether the root closed."""
  depth = 0
  last_end: int | None = None

  for index, char in _structural_chars(text, start):
    if char in "{[":
      depth += 1
      continue

    if char in _CLOSERS:
      depth -= 1

      # The root closed; whatever follows is trailing prose.
      if depth == 0:
        return index + 1, True

      # A direct child of the root just closed.
      if depth == 1:
        last_end = index + 1

  if last_end is None:
    return None

  return last_end, False
