"""
Class Scope Tracker.

Follows brace nesting through a header so that only declarations sitting
directly inside the outermost class body are annotated. Inline function
bodies, nested structs and enums open a deeper block and are skipped.

The state machine is exposed as a pure function, :func:`process`, that takes
a :class:`NestingState` and a line and returns the next state together with
the lines to emit. :class:`ClassScopeTracker` wraps it for callers that prefer
to keep the state inside an object.

Braces are only recognised when they open a line (after indentation), which
matches the Qt/Allman layout::

    class Foo : public QObject
    {
    public:
        void bar(int x);
    };
"""

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from doxegenate.core.declaration import method_comments
from doxegenate.enums import CommentMarker

logger = logging.getLogger(__name__)

_STALE_PREFIXES = (CommentMarker.RETURN.value, CommentMarker.PARAM.value)


class NestingState(BaseModel):
  """
  Immutable brace-tracking state for one file.

  Attributes:
      depth: Number of ``{`` blocks opened since the class keyword was seen.
      in_class: True between a class definition line and its closing brace.
  """

  model_config = ConfigDict(frozen=True)

  depth: int = 0
  in_class: bool = False

  @property
  def at_member_level(self) -> bool:
    """True when lines belong directly to the outermost class body."""
    return self.in_class and self.depth == 1


def should_drop(line: str) -> bool:
  """
  Checks whether a line is a previously generated annotation.

  Args:
      line: A line of header text.

  Returns:
      bool: True if the line starts (after indentation) with a generated marker.
  """
  return line.lstrip().startswith(_STALE_PREFIXES)


def is_class_definition(line: str) -> bool:
  """True for ``class Foo ...`` lines that are not forward declarations."""
  return line.lstrip().startswith("class ") and not line.rstrip().endswith(";")


def line_terminator(line: str) -> str:
  """Returns the line's terminator, defaulting to ``\\n`` when it has none."""
  body = line.rstrip("\r\n")
  return line[len(body) :] or "\n"


def advance(state: NestingState, line: str) -> NestingState:
  """
  Computes the state after reading ``line``.

  Args:
      state: State before the line.
      line: The line being read.

  Returns:
      NestingState: The updated state.
  """
  in_class = state.in_class or is_class_definition(line)
  depth = state.depth

  if in_class:
    was_nested = depth > 0
    stripped = line.lstrip()
    if stripped.startswith("{"):
      depth += 1
    elif stripped.startswith("}"):
      depth = max(depth - 1, 0)

    if was_nested:
      in_class = depth > 0

  return NestingState(depth=depth, in_class=in_class)


def annotate(state: NestingState, line: str) -> Optional[str]:
  """
  Runs the signature annotator when the line is a candidate member declaration.

  Returns:
      Optional[str]: Comment text without a trailing newline, or None.
  """
  if not state.at_member_level or "(" not in line:
    return None
  return method_comments(line)


def process(state: NestingState, line: str) -> Tuple[NestingState, List[str]]:
  """
  Feeds one line through the scope state machine.

  Args:
      state: State before the line.
      line: The incoming line, usually with its terminator.

  Returns:
      Tuple[NestingState, List[str]]: The next state and the lines to emit,
      generated comments first. A stale annotation emits nothing and leaves
      the state untouched.
  """
  if should_drop(line):
    return state, []

  state = advance(state, line)
  comments = annotate(state, line)
  if not comments:
    return state, [line]

  eol = line_terminator(line)
  out = [comment + eol for comment in comments.split("\n")]
  out.append(line)
  logger.debug("Annotated %r with %d line(s)", line.strip(), len(out) - 1)
  return state, out


class ClassScopeTracker:
  """
  Stateful wrapper over :func:`process` for one file.

  A new tracker must be created for every file.
  """

  def __init__(self) -> None:
    self.state = NestingState()

  def should_drop(self, line: str) -> bool:
    """True if ``line`` is a stale generated annotation; see :func:`should_drop`."""
    return should_drop(line)

  def process(self, line: str) -> Optional[str]:
    """
    Processes one line.

    Args:
        line: The incoming line.

    Returns:
        Optional[str]: None for a stale annotation; otherwise the generated
        comments joined with newlines and followed by the original line, or
        the original line alone.
    """
    if should_drop(line):
      return None

    self.state = advance(self.state, line)
    comments = annotate(self.state, line)
    if comments:
      return f"{comments}\n{line}"
    return line
