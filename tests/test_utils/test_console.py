"""
Tests for the diagnostic console and logging helpers.

Verifies:
1. Singleton proxy correctness.
2. Injection capabilities (`set_console`).
3. Standard logging wrappers.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from shellrs.utils.console import (
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
)


def test_console_singleton_proxy():
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(get_console(), Console)


def test_default_console_targets_stderr():
  assert get_console().stderr is True


def test_custom_console_injection(captured_log):
  log_info("Generating into buffer")
  log_warning("Not supported yet: Foo")
  log_error("boom")
  log_success("all good")

  output = captured_log.export_text()
  assert "Generating into buffer" in output
  assert "Not supported yet: Foo" in output
  assert "boom" in output
  assert "SUCCESS" in output


def test_reset_functionality():
  temp = Console()
  set_console(temp)
  assert get_console() is temp

  reset_console()
  assert get_console() is not temp


def test_single_rich_handler():
  set_console(Console(record=True))
  set_console(Console(record=True))
  handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1
