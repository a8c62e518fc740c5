"""Module entry point for running with python -m nestedbook."""

import sys

from nestedbook.cli import main

if __name__ == "__main__":
    sys.exit(main())
