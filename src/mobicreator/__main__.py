"""Module entry point for running with python -m mobicreator."""

import sys

from mobicreator.cli import main

if __name__ == "__main__":
    sys.exit(main())
