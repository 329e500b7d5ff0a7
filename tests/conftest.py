"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so captured diagnostics do not leak between tests.
"""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'shellrs' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from shellrs.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console is reset to stderr after every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def captured_log():
  """
  Routes logging into a recording console.

  Returns:
      Console: Call ``export_text()`` to read the diagnostics.
  """
  capture = Console(record=True, width=200)
  set_console(capture)
  return capture
