"""
Enumerations for doxegenate.

This module defines the literal markers emitted in front of generated
documentation lines and the declaration modifiers stripped from return types.
"""

from enum import Enum


class CommentMarker(str, Enum):
  """
  Prefixes of generated documentation lines.

  These must match byte-for-byte between runs: a line starting with one of
  them is treated as a stale annotation and regenerated.
  """

  PARAM = "/// @param"
  RETURN = "/// @return"


class Modifier(str, Enum):
  """
  Declaration modifiers that are not part of a return type name.
  """

  STATIC = "static"
  INLINE = "inline"
  VIRTUAL = "virtual"
