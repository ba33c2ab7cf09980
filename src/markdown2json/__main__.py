"""Module entry point for running with python -m markdown2json."""

import sys

from markdown2json.cli import main

if __name__ == "__main__":
    sys.exit(main())
