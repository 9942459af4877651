"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Singleton Proxy correctness.
2. Injection capabilities (`set_console`).
3. Standard logging wrappers.
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from neverthrow_lint.utils.console import (
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


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console is reset to stdout after every test."""
  reset_console()
  yield
  reset_console()


def test_console_singleton_proxy():
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(get_console(), Console)


def test_custom_console_injection():
  """
  Verify a recording console receives both prints and log records.
  This is how editor integrations capture lint output.
  """
  capture = Console(record=True, width=120)
  set_console(capture)

  console.print("Direct line")
  log_info("Captured log")

  output = capture.export_text()
  assert "Direct line" in output
  assert "Captured log" in output
  assert "ℹ️" in output


def test_reset_creates_fresh_backend():
  temp = Console()
  set_console(temp)
  assert get_console() is temp

  reset_console()

  assert get_console() is not temp
  assert isinstance(get_console(), Console)


def test_single_rich_handler_after_rebinding():
  set_console(Console(record=True))
  set_console(Console(record=True))

  handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1
  assert handlers[0].console is get_console()


def test_logging_wrappers_format():
  capture = Console(record=True, width=120)
  set_console(capture)

  log_info("InfoText")
  log_success("SuccessText")
  log_warning("WarnText")
  log_error("ErrorText")

  output = capture.export_text()
  for text, prefix in [("InfoText", "ℹ️"), ("SuccessText", "✅"), ("WarnText", "⚠️"), ("ErrorText", "❌")]:
    assert text in output
    assert prefix in output
  assert "SUCCESS" in output


def test_success_level_registered():
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"


def test_proxy_getattr_delegation():
  # 'width' is a property of Rich Console, not defined on _ConsoleProxy
  width = console.width
  assert isinstance(width, int)
  assert width > 0
