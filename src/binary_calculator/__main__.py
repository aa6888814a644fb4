"""Entry point for running as a module: python -m binary_calculator"""

import sys

from binary_calculator.cli import main

if __name__ == "__main__":
    sys.exit(main())
