"""
Header Discovery.

Resolves the set of header files an annotation run should touch from three
sources, in order:

1. Paths given explicitly (files, or directories scanned for ``*.h``).
2. Glob patterns relative to the configured project root.
3. The ``HEADERS`` variable of a qmake project file.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from doxegenate.config import RuntimeConfig

logger = logging.getLogger(__name__)

HEADER_SUFFIX = ".h"


def _logical_lines(text: str) -> List[str]:
  """Joins backslash-continued lines and drops ``#`` comments."""
  joined: List[str] = []
  pending = ""
  for raw in text.splitlines():
    line = raw.split("#", 1)[0].rstrip()
    if line.endswith("\\"):
      pending += line[:-1] + " "
      continue
    joined.append(pending + line)
    pending = ""
  if pending:
    joined.append(pending)
  return joined


def parse_pro_headers(pro_path: Path) -> List[Path]:
  """
  Lists the headers declared in a qmake project file.

  ``HEADERS = ...``, ``HEADERS += ...`` and ``HEADERS -= ...`` assignments
  are applied in order, with backslash continuations. Entries not ending in
  ``.h`` are skipped.

  Args:
      pro_path: Path to the ``.pro`` file.

  Returns:
      List[Path]: Absolute header paths, relative entries resolved against
      the project file's directory.

  Raises:
      OSError: If the project file cannot be read.
  """
  base = pro_path.resolve().parent
  text = pro_path.read_text(encoding="utf-8")
  headers: List[Path] = []

  for line in _logical_lines(text):
    name, sep, value = line.partition("=")
    if not sep:
      continue
    name = name.strip()
    op = name[-1] if name[-1:] in ("+", "-") else ""
    if name.rstrip("+-").strip() != "HEADERS":
      continue

    entries = [(base / e).resolve() for e in value.split() if e.endswith(HEADER_SUFFIX)]
    if op == "-":
      headers = [h for h in headers if h not in entries]
    else:
      headers.extend(entries)

  logger.debug("Found %d header(s) in %s", len(headers), pro_path)
  return headers


def expand_globs(root: Path, patterns: Iterable[str]) -> List[Path]:
  """
  Expands glob patterns relative to ``root``.

  Args:
      root: Directory patterns are relative to.
      patterns: Patterns such as ``"forms/*.h"`` or ``"**/*.h"``.

  Returns:
      List[Path]: Matching files, sorted per pattern.
  """
  found: List[Path] = []
  for pattern in patterns:
    matches = sorted(p.resolve() for p in root.glob(pattern) if p.is_file())
    if not matches:
      logger.debug("Pattern '%s' matched nothing under %s", pattern, root)
    found.extend(matches)
  return found


def collect_headers(config: RuntimeConfig, paths: Optional[Iterable[Path]] = None) -> List[Path]:
  """
  Resolves every header selected by explicit paths and the configuration.

  Args:
      config: Active runtime configuration.
      paths: Explicit files or directories given on the command line.

  Returns:
      List[Path]: De-duplicated absolute paths; explicit paths come first.
  """
  candidates: List[Path] = []

  for path in paths or []:
    if path.is_dir():
      candidates.extend(sorted(p.resolve() for p in path.glob(f"*{HEADER_SUFFIX}") if p.is_file()))
    else:
      candidates.append(path.resolve())

  candidates.extend(expand_globs(config.project_root, config.header_globs))

  if config.project_file:
    candidates.extend(parse_pro_headers(config.project_file))

  return list(dict.fromkeys(candidates))
