"""
Headers Command Handler.

Lists the header files an `annotate` run would touch, so glob and project
file settings can be checked before anything is rewritten.
"""

from pathlib import Path
from typing import List, Optional

from doxegenate.config import RuntimeConfig
from doxegenate.discovery import collect_headers
from doxegenate.utils.console import log_error, log_warning


def handle_headers(
  paths: List[Path],
  root: Optional[Path],
  globs: Optional[List[str]],
  project_file: Optional[Path],
) -> int:
  """
  Prints one resolved header path per line.

  Args:
      paths: Explicit header files or directories. When given, they replace
          the configured globs and project file.
      root: Override for the directory header globs are relative to.
      globs: Override for the header glob patterns.
      project_file: Override for the qmake project file.

  Returns:
      int: Exit code (0 if at least one header was found).
  """
  try:
    config = RuntimeConfig.load(
      project_root=root,
      header_globs=globs,
      project_file=project_file,
      search_path=paths[0] if paths else None,
      ignore_toml_selection=bool(paths),
    )
    headers = collect_headers(config, paths)
  except (ValueError, OSError) as e:
    log_error(f"Could not resolve headers: {e}")
    return 1

  if not headers:
    log_warning("No header files matched.")
    return 1

  for header in headers:
    print(header)
  return 0
