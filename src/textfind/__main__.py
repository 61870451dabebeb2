#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Run the textfind command line tool with ``python -m textfind``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
