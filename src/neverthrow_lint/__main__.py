"""
Entry point for module execution (``python -m neverthrow_lint``).

This module delegates execution to the CLI handler in ``neverthrow_lint.cli.__main__``.
"""

import sys
from neverthrow_lint.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
