"""
Main Entry Point for doxegenate CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `doxegenate.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from doxegenate.cli import commands
from doxegenate import __version__


def _add_selection_args(cmd: argparse.ArgumentParser) -> None:
  """Arguments shared by commands that resolve a set of headers."""
  cmd.add_argument("paths", nargs="*", type=Path, help="Header files or directories (scanned for *.h)")
  cmd.add_argument("--root", type=Path, default=None, help="Directory --glob patterns are relative to")
  cmd.add_argument(
    "--glob",
    dest="globs",
    action="append",
    default=None,
    help="Header glob pattern, repeatable (e.g. 'PrimerDesign/*.h'). Overrides config.",
  )
  cmd.add_argument("--pro", type=Path, default=None, help="qmake project file whose HEADERS are annotated")


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="doxegenate: @param/@return comments for C++ headers")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: ANNOTATE ---
  cmd_ann = subparsers.add_parser("annotate", help="Insert documentation comments into headers in place")
  _add_selection_args(cmd_ann)
  cmd_ann.add_argument("--backup-suffix", default=None, help="Suffix for backup copies (default: .old)")
  cmd_ann.add_argument(
    "--dry-run",
    action="store_true",
    default=None,
    help="Report what would change without writing (Overrides config)",
  )
  cmd_ann.add_argument(
    "--check",
    action="store_true",
    help="Dry run that exits non-zero if any header would change",
  )
  cmd_ann.add_argument(
    "--skip-unchanged",
    action="store_true",
    default=None,
    help="Do not rewrite or back up headers that would not change (Overrides config)",
  )

  # --- Command: PREVIEW ---
  cmd_prev = subparsers.add_parser("preview", help="Print the annotated version of one header")
  cmd_prev.add_argument("path", type=Path, help="Header file")

  # --- Command: HEADERS ---
  cmd_hdr = subparsers.add_parser("headers", help="List the headers 'annotate' would process")
  _add_selection_args(cmd_hdr)

  args = parser.parse_args(argv)

  if args.command == "annotate":
    return commands.handle_annotate(
      args.paths,
      args.root,
      args.globs,
      args.pro,
      args.backup_suffix,
      args.dry_run,
      args.check,
      args.skip_unchanged,
    )

  elif args.command == "preview":
    return commands.handle_preview(args.path)

  elif args.command == "headers":
    return commands.handle_headers(args.paths, args.root, args.globs, args.pro)

  return 0


if __name__ == "__main__":
  sys.exit(main())
