"""
Annotate Command Handler.

This module implements the `doxegenate annotate` and `doxegenate preview`
commands. It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Header discovery (explicit paths, globs, qmake project file).
3. In-place annotation with backups via the HeaderCommenter.
4. A summary of what changed.
"""

from pathlib import Path
from typing import Dict, List, Optional

from rich.table import Table

from doxegenate.config import RuntimeConfig
from doxegenate.core.commenter import HeaderCommenter
from doxegenate.core.engine import AnnotationResult
from doxegenate.discovery import collect_headers
from doxegenate.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
)


def handle_annotate(
  paths: List[Path],
  root: Optional[Path],
  globs: Optional[List[str]],
  project_file: Optional[Path],
  backup_suffix: Optional[str],
  dry_run: Optional[bool],
  check: bool,
  skip_unchanged: Optional[bool],
) -> int:
  """
  Handles the 'annotate' command execution.

  Args:
      paths: Explicit header files or directories. When given, they replace
          the configured globs and project file.
      root: Override for the directory header globs are relative to.
      globs: Override for the header glob patterns.
      project_file: Override for the qmake project file.
      backup_suffix: Override for the backup file suffix.
      dry_run: If True, nothing is written.
      check: If True, implies dry run and fails when any file would change.
      skip_unchanged: If True, files that would not change are left alone.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  for path in paths:
    if not path.exists():
      log_error(f"Input not found: {path}")
      return 1

  try:
    config = RuntimeConfig.load(
      project_root=root,
      header_globs=globs,
      project_file=project_file,
      backup_suffix=backup_suffix,
      dry_run=True if check else dry_run,
      skip_unchanged=skip_unchanged,
      search_path=paths[0] if paths else None,
      ignore_toml_selection=bool(paths),
    )
    headers = collect_headers(config, paths)
  except (ValueError, OSError) as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  if not headers:
    log_warning("No header files to annotate. Pass paths, --glob or --pro.")
    return 1

  log_info(f"Processing {len(headers)} header(s)...")
  commenter = HeaderCommenter(config)
  batch_results: Dict[str, AnnotationResult] = {}
  for header in headers:
    batch_results[str(header)] = _annotate_single_file(commenter, header)

  _print_batch_summary(batch_results, config.dry_run)

  if any(not r.success for r in batch_results.values()):
    return 1
  if check and any(r.changed for r in batch_results.values()):
    log_error("Some headers are missing generated documentation.")
    return 1
  return 0


def handle_preview(path: Path) -> int:
  """
  Prints the annotated text of one header to stdout without writing it.

  Args:
      path: Header file to preview.

  Returns:
      int: Exit code.
  """
  if not path.is_file():
    log_error(f"Input not found: {path}")
    return 1

  result = _annotate_single_file(HeaderCommenter(RuntimeConfig(dry_run=True)), path, write=False)
  if not result.success:
    return 1

  print(result.text, end="")
  return 0


def _annotate_single_file(commenter: HeaderCommenter, path: Path, write: bool = True) -> AnnotationResult:
  """
  Annotates one header, converting I/O failures into a failed result.

  Args:
      commenter: Configured commenter.
      path: Header file.
      write: If False, the file is only read and annotated.

  Returns:
      AnnotationResult: Counters, or the error message on failure.
  """
  try:
    if write:
      return commenter.comment(path)
    return commenter.annotate_file(path)
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to annotate {path}: {e}")
    return AnnotationResult(errors=[str(e)])


def _print_batch_summary(results: Dict[str, AnnotationResult], dry_run: bool) -> None:
  """
  Renders a summary table of annotation results to the console.

  Args:
      results: Mapping of file path to its result.
      dry_run: Whether files were left untouched.
  """
  total = len(results)
  failures = sum(1 for r in results.values() if not r.success)
  changed = sum(1 for r in results.values() if r.changed)
  verb = "would change" if dry_run else "changed"

  table = Table(title="Annotation Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("@param", justify="right")
  table.add_column("@return", justify="right")
  table.add_column("Stale", justify="right")

  for filename, res in results.items():
    if not res.success:
      table.add_row(filename, "❌ Failed", "-", "-", "; ".join(res.errors))
      continue
    if not res.changed:
      continue
    table.add_row(filename, f"✏️ {verb}", str(res.params_added), str(res.returns_added), str(res.stale_removed))

  if changed or failures:
    console.print(table)

  if failures:
    log_error(f"{failures}/{total} header(s) failed.")
  else:
    log_success(f"Batch Complete: {changed}/{total} header(s) {verb}.")
