"""
Tests for Logging Utility and Console Injection.

Verifies:
1. Proxy forwarding to the active Rich console.
2. Injection capabilities (`set_console`).
3. Standard logging wrappers, including the SUCCESS level.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from doxegenate.utils.console import (
  SUCCESS_LEVEL_NUM,
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
)


def test_proxy_forwards_to_backend():
  assert isinstance(get_console(), Console)
  assert console.width == get_console().width


def test_custom_console_injection():
  capture = Console(record=True, width=120)
  set_console(capture)

  log_info("Annotating [path]Foo.h[/path]")
  log_warning("Careful")

  output = capture.export_text()
  assert "Annotating Foo.h" in output
  assert "Careful" in output


def test_reset_creates_fresh_console():
  temp = Console()
  set_console(temp)
  assert get_console() is temp

  reset_console()

  assert get_console() is not temp


def test_single_rich_handler_after_swaps():
  set_console(Console())
  set_console(Console())

  handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1


def test_logging_wrappers_format(capsys):
  log_success("Done")
  log_error("Broken")

  out = capsys.readouterr().out
  assert "✅ Done" in out
  assert "❌ Broken" in out
  assert "SUCCESS" in out


def test_success_level_registered():
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"
