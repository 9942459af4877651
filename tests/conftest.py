"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports (package sources and test helpers).
- Console isolation so tests capturing output do not leak backends.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'neverthrow_lint' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
# Make the shared ESTree builders importable from nested test directories
sys.path.insert(0, str(Path(__file__).parent))

from neverthrow_lint.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures the console proxy is restored to stdout after each test."""
  yield
  reset_console()
