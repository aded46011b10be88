"""
Signature Annotator.

Heuristics that turn a single line of C++ header text into documentation
comment lines:

.. code-block:: cpp

    /// @param parent QWidget * (Defaults to 0.)
    /// @return bool
    bool open(QWidget *parent = 0);

Nothing here is a real parser. The line is split on parentheses, commas,
``=`` and whitespace. Templates with commas, multi-line signatures and
operator overloads produce wrong (but well-formed) output or nothing at all.
The splitting is confined to :class:`Declaration` so callers only deal with
the rendered comment text.
"""

import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from doxegenate.enums import CommentMarker, Modifier

# Whole-word match, not only " explicit " between spaces, so column 0 and tabs are covered.
_EXPLICIT_RE = re.compile(r"(?<!\S)explicit\s+")
_MODIFIER_RE = re.compile(r" (?:%s)(?= )" % "|".join(m.value for m in Modifier))
_SIGILS = ("*", "&")


def leading_space(line: str) -> str:
  """Returns the whitespace prefix of ``line``."""
  return line[: len(line) - len(line.lstrip())]


class Declaration(BaseModel):
  """
  A method declaration as seen by the line heuristics.

  Attributes:
      indent: Leading whitespace of the source line, reused for every comment.
      params: Raw parameter fragments between the first ``(`` and the last ``)``.
          ``None`` when the line has no complete parameter list (e.g. the
          signature continues on the next line); empty for ``foo()``.
      head: Whitespace-separated tokens before the first ``(``.
  """

  model_config = ConfigDict(frozen=True)

  indent: str = ""
  params: Optional[List[str]] = None
  head: List[str] = Field(default_factory=list)

  @classmethod
  def parse(cls, line: str) -> "Declaration":
    """
    Splits a line into indentation, parameter fragments and head tokens.

    Args:
        line: One line of header text, with or without its terminator.

    Returns:
        Declaration: The parsed view. Parsing never fails.
    """
    params: Optional[List[str]] = None
    start = line.find("(")
    end = line.rfind(")")
    if start != -1 and end > start:
      inner = line[start + 1 : end].strip()
      params = inner.split(",") if inner else []

    return cls(indent=leading_space(line), params=params, head=line.partition("(")[0].split())

  def return_tokens(self) -> List[str]:
    """
    Head tokens with the method name removed.

    A trailing ``*name`` or ``&name`` keeps only its sigil, so the sigil is
    read as part of the return type.
    """
    if not self.head:
      return []

    tokens = list(self.head)
    last = tokens[-1]
    if last.startswith("*"):
      tokens[-1] = "*"
    elif last.startswith("&"):
      tokens[-1] = "&"
    else:
      tokens.pop()
    return tokens


def render_param(fragment: str) -> str:
  """
  Renders one raw parameter as ``<name> <type> (Defaults to <value>.)``.

  Args:
      fragment: Text of one parameter, e.g. ``"QWidget *parent = 0"``.

  Returns:
      str: The rendered parameter documentation (without the marker).
  """
  declarator, _, default = fragment.strip().partition("=")

  pieces = declarator.strip().rsplit(None, 1)
  if len(pieces) == 2:
    type_head, name = pieces
  else:
    type_head, name = "", "".join(pieces)

  type_words = type_head.split()
  if name.startswith(_SIGILS):
    type_words.append(name[0])
    name = name[1:]
  type_head = " ".join(type_words)

  rendered = f"{name} {type_head}" if type_head else name

  default = default.strip()
  if default:
    rendered += f" (Defaults to {default}.)"
  return rendered


def param_comments(line: str) -> Optional[str]:
  """
  Builds one ``/// @param`` line per comma-separated parameter.

  Args:
      line: The declaration line.

  Returns:
      Optional[str]: Newline-joined comment lines, or None when the line has
      no complete, non-empty parameter list.
  """
  decl = Declaration.parse(line)
  if not decl.params:
    return None

  prefix = f"{decl.indent}{CommentMarker.PARAM.value} "
  return "\n".join(prefix + render_param(fragment) for fragment in decl.params)


def return_comment(line: str) -> Optional[str]:
  """
  Builds the ``/// @return`` line from the tokens in front of the method name.

  Constructors and destructors have nothing in front of their name and get
  no return comment.

  Args:
      line: The declaration line.

  Returns:
      Optional[str]: The comment line, or None.
  """
  decl = Declaration.parse(line)
  tokens = decl.return_tokens()
  if not tokens:
    return None

  comment = f"{decl.indent}{CommentMarker.RETURN.value} {' '.join(tokens)}"
  return _MODIFIER_RE.sub("", comment)


def method_comments(line: str) -> Optional[str]:
  """
  Generates every documentation line for a declaration.

  Args:
      line: One line of header text.

  Returns:
      Optional[str]: Parameter lines followed by the return line, joined by
      newlines. None for comment lines and for declarations that yield
      neither.
  """
  if line.lstrip().startswith("/"):
    return None

  line = _EXPLICIT_RE.sub("", line, count=1)
  comments = [c for c in (param_comments(line), return_comment(line)) if c]
  return "\n".join(comments) if comments else None
