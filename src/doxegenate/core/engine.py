"""
Annotation Engine.

Drives :mod:`doxegenate.core.scope` over a whole file worth of lines and
reports what changed. The engine performs no I/O: callers hand it text (or any
iterable of lines) and write the result wherever they like.
"""

import logging
import re
from typing import Iterable, Iterator, List

from pydantic import BaseModel, Field

from doxegenate.core.scope import NestingState, process
from doxegenate.enums import CommentMarker

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


class AnnotationResult(BaseModel):
  """
  Outcome of annotating one file.
  """

  text: str = Field(default="", description="The annotated source text.")
  original: str = Field(default="", description="The text that was annotated.")
  methods_annotated: int = Field(default=0, description="Declarations that received comments.")
  params_added: int = Field(default=0, description="Number of '@param' lines written.")
  returns_added: int = Field(default=0, description="Number of '@return' lines written.")
  stale_removed: int = Field(default=0, description="Previously generated lines that were discarded.")
  errors: List[str] = Field(default_factory=list, description="I/O problems reported by the caller.")

  @property
  def success(self) -> bool:
    """True if the file was processed without errors."""
    return not self.errors

  @property
  def changed(self) -> bool:
    """True if the annotated text differs from the input."""
    return self.text != self.original


def split_lines(text: str) -> List[str]:
  """
  Splits text after each ``\\n``, keeping terminators.

  Unlike ``str.splitlines`` this does not break on form feeds, vertical tabs
  or Unicode line separators, which may appear inside comments.
  """
  return _LINE_RE.findall(text)


def _annotate_stream(lines: Iterable[str]) -> Iterator[List[str]]:
  """Yields, per input line, the lines emitted for it."""
  state = NestingState()
  for line in lines:
    state, out = process(state, line)
    yield out


def annotate_lines(lines: Iterable[str]) -> Iterator[str]:
  """
  Lazily annotates a stream of lines belonging to a single file.

  Args:
      lines: Lines in file order, normally with terminators.

  Yields:
      str: Output lines in order.
  """
  for out in _annotate_stream(lines):
    yield from out


class AnnotationEngine:
  """
  Annotates complete header texts and tallies the generated lines.
  """

  def run(self, text: str) -> AnnotationResult:
    """
    Annotates one header.

    Args:
        text: Full file content.

    Returns:
        AnnotationResult: Annotated text and counters.
    """
    result = AnnotationResult(original=text)
    chunks = []

    for out in _annotate_stream(split_lines(text)):
      if not out:
        result.stale_removed += 1
        continue

      generated = out[:-1]
      if generated:
        result.methods_annotated += 1
        for comment in generated:
          if comment.lstrip().startswith(CommentMarker.PARAM.value):
            result.params_added += 1
          else:
            result.returns_added += 1
      chunks.extend(out)

    result.text = "".join(chunks)
    logger.debug(
      "Annotated %d declaration(s): %d param, %d return, %d stale removed",
      result.methods_annotated,
      result.params_added,
      result.returns_added,
      result.stale_removed,
    )
    return result
