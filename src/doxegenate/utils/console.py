"""
Console and Logging Utilities.

All user-facing output goes through the standard ``logging`` module, rendered
by ``rich``. The active :class:`rich.console.Console` sits behind a proxy so
tests (or an embedding application) can swap it for a recording console with
:func:`set_console` without re-importing modules that hold ``console``.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards attribute access to a replaceable Rich console.

  Replacing the backend also re-binds the Rich logging handler so that log
  records follow the console.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._bind_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    """
    Swaps the console that output is written to.

    Args:
        new_console (Console): The Rich console to use from now on.
    """
    self._backend = new_console
    self._bind_logging()

  def reset(self) -> None:
    """Replaces the backend with a fresh standard-output console."""
    self.set_backend(Console(theme=_THEME))

  def _bind_logging(self) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(handler)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Routes console output and log records to ``new_console``.

  Args:
      new_console (Console): e.g. ``Console(record=True)`` to capture output.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Restores output to a fresh standard-output console."""
  console.reset()


def get_console() -> Console:
  """
  Returns:
      Console: The active Rich console.
  """
  return console.backend


def log_info(msg: str) -> None:
  """Logs an informational message. Rich markup such as ``[path]`` is allowed."""
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """Logs a message at the SUCCESS level."""
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """Logs a warning."""
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """Logs an error."""
  logging.error(f"❌ {msg}", extra={"markup": True})
