"""
Header Commenter.

Applies the :class:`~doxegenate.core.engine.AnnotationEngine` to files on
disk. The original file is renamed to a backup (``Foo.h`` -> ``Foo.h.old``)
and the annotated text is written to the original path.
"""

import logging
from pathlib import Path
from typing import Optional

from doxegenate.config import RuntimeConfig
from doxegenate.core.engine import AnnotationEngine, AnnotationResult
from doxegenate.utils.console import log_info

logger = logging.getLogger(__name__)


class HeaderCommenter:
  """
  Annotates header files in place.
  """

  def __init__(self, config: RuntimeConfig, engine: Optional[AnnotationEngine] = None) -> None:
    """
    Args:
        config: Runtime configuration (backup suffix, dry-run, skip-unchanged).
        engine: Engine instance; a default one is created if omitted.
    """
    self.config = config
    self.engine = engine or AnnotationEngine()

  def backup_path(self, path: Path) -> Path:
    """Returns the backup location for ``path``."""
    return path.with_name(path.name + self.config.backup_suffix)

  def annotate_file(self, path: Path) -> AnnotationResult:
    """
    Annotates a file without writing anything.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, "rt", encoding="utf-8", newline="") as f:
      text = f.read()
    return self.engine.run(text)

  def comment(self, path: Path) -> AnnotationResult:
    """
    Annotates ``path`` and rewrites it, keeping a backup of the original.

    A stale backup from a previous run is replaced.

    Args:
        path: Header file to rewrite.

    Returns:
        AnnotationResult: Counters and text for the file.

    Raises:
        OSError: If reading, renaming or writing fails.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    log_info(f"Annotating [path]{path}[/path]")
    result = self.annotate_file(path)

    if self.config.dry_run:
      return result
    if self.config.skip_unchanged and not result.changed:
      logger.debug("Unchanged, leaving %s in place", path)
      return result

    backup = self.backup_path(path)
    if backup.exists():
      backup.unlink()
    path.rename(backup)

    with open(path, "wt", encoding="utf-8", newline="") as f:
      f.write(result.text)
    return result
