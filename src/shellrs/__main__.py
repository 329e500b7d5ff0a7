"""
Entry point for module execution (``python -m shellrs``).
"""

import sys
from shellrs.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
