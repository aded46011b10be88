"""
CLI Command Handlers Facade.

Re-exports handlers from `doxegenate.cli.handlers` so the entry point and
tests have a single import location.
"""

from doxegenate.cli.handlers.annotate import (
  handle_annotate,
  handle_preview,
  _annotate_single_file,
  _print_batch_summary,
)
from doxegenate.cli.handlers.project import handle_headers

__all__ = [
  "_annotate_single_file",
  "_print_batch_summary",
  "handle_annotate",
  "handle_headers",
  "handle_preview",
]
