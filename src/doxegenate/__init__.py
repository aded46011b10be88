"""
doxegenate Package.

Mechanically inserts ``/// @param`` and ``/// @return`` documentation lines
above the method declarations of C++ class headers, inferring names and
types from the declaration text.

Usage
-----

Simple String Annotation
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import doxegenate

    header = "class Foo\\n{\\npublic:\\n    int size(const QString &key);\\n};\\n"
    print(doxegenate.annotate(header))
    # class Foo
    # {
    # public:
    #     /// @param key const QString &
    #     /// @return int
    #     int size(const QString &key);
    # };

Line Streams
^^^^^^^^^^^^

.. code-block:: python

    from doxegenate import annotate_lines

    with open("Foo.h", newline="") as f:
        out = "".join(annotate_lines(f))

Running the annotation again on its own output yields the same text:
previously generated lines are dropped and regenerated.
"""

from doxegenate.config import RuntimeConfig
from doxegenate.core.declaration import method_comments
from doxegenate.core.engine import AnnotationEngine, AnnotationResult, annotate_lines
from doxegenate.core.scope import ClassScopeTracker, NestingState, process

__version__ = "0.1.0"


def annotate(text: str) -> str:
  """
  Annotates the full text of one header.

  Args:
      text (str): Header content.

  Returns:
      str: The content with generated documentation lines.
  """
  return AnnotationEngine().run(text).text


__all__ = [
  "AnnotationEngine",
  "AnnotationResult",
  "ClassScopeTracker",
  "NestingState",
  "RuntimeConfig",
  "annotate",
  "annotate_lines",
  "method_comments",
  "process",
  "__version__",
]
