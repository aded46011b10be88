"""
Runtime Configuration Store.

Settings come from the ``[tool.doxegenate]`` table of the nearest
``pyproject.toml`` and are overridden by CLI arguments:

.. code-block:: toml

    [tool.doxegenate]
    header_globs = ["PrimerDesign/*.h", "widgets/SequenceTextView.h"]
    project_file = "AlignShop.pro"
    backup_suffix = ".old"
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Configuration for one annotation run.
  """

  project_root: Path = Field(default_factory=Path.cwd, description="Directory that header globs are relative to.")
  header_globs: List[str] = Field(default_factory=list, description="Glob patterns selecting headers to annotate.")
  project_file: Optional[Path] = Field(None, description="qmake project file whose HEADERS are annotated.")
  backup_suffix: str = Field(".old", description="Suffix appended to the original file name for the backup copy.")
  dry_run: bool = Field(False, description="If True, report changes without writing files.")
  skip_unchanged: bool = Field(False, description="If True, leave files untouched when annotation changes nothing.")

  @field_validator("backup_suffix")
  @classmethod
  def validate_backup_suffix(cls, v: str) -> str:
    """
    Ensures the suffix produces a sibling file name.

    Args:
        v (str): The configured suffix.

    Returns:
        str: The suffix, unchanged.

    Raises:
        ValueError: If the suffix is empty or contains a path separator.
    """
    if not v:
      raise ValueError("backup_suffix must not be empty.")
    if "/" in v or "\\" in v:
      raise ValueError(f"backup_suffix must not contain path separators: '{v}'")
    return v

  @classmethod
  def load(
    cls,
    project_root: Optional[Path] = None,
    header_globs: Optional[List[str]] = None,
    project_file: Optional[Path] = None,
    backup_suffix: Optional[str] = None,
    dry_run: Optional[bool] = None,
    skip_unchanged: Optional[bool] = None,
    search_path: Optional[Path] = None,
    ignore_toml_selection: bool = False,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Relative paths from the TOML file are resolved against the directory
    that contains it. Relative CLI paths are relative to the working directory.

    Args:
        project_root (Optional[Path]): Override for the glob root.
        header_globs (Optional[List[str]]): Override for the glob list.
        project_file (Optional[Path]): Override for the qmake project file.
        backup_suffix (Optional[str]): Override for the backup suffix.
        dry_run (Optional[bool]): Override for dry-run mode.
        skip_unchanged (Optional[bool]): Override for skipping unchanged files.
        search_path (Optional[Path]): Directory to start searching for TOML config.
        ignore_toml_selection (bool): Skip the TOML ``header_globs`` and
            ``project_file``, e.g. when explicit paths select the headers.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValueError: If a resolved value fails validation.
    """
    start_dir = search_path or project_root or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)
    base_dir = toml_dir or Path.cwd()

    # 1. Root & Globs
    final_root = project_root
    if final_root is None:
      final_root = base_dir / toml_config.get("project_root", ".")

    if header_globs or ignore_toml_selection:
      final_globs = list(header_globs or [])
    else:
      final_globs = list(toml_config.get("header_globs", []))

    # 2. Project File
    final_pro = project_file
    if final_pro is None and not ignore_toml_selection and "project_file" in toml_config:
      final_pro = base_dir / toml_config["project_file"]

    # 3. Flags
    final_suffix = backup_suffix if backup_suffix is not None else toml_config.get("backup_suffix", ".old")
    final_dry = dry_run if dry_run is not None else toml_config.get("dry_run", False)
    final_skip = skip_unchanged if skip_unchanged is not None else toml_config.get("skip_unchanged", False)

    return cls(
      project_root=final_root.resolve(),
      header_globs=final_globs,
      project_file=final_pro,
      backup_suffix=final_suffix,
      dry_run=final_dry,
      skip_unchanged=final_skip,
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()
  if current.is_file():
    current = current.parent

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      section = data.get("tool", {}).get("doxegenate")
      if section is None:
        continue
      return section, parent

  return {}, None
