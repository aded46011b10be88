"""
Entry point for module execution (``python -m doxegenate``).

This module delegates execution to the CLI handler in ``doxegenate.cli.__main__``.
"""

import sys
from doxegenate.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
