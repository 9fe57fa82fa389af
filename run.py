"""Entry point for the smart chunking CLI."""

import sys

from smartchunk.cli import main

if __name__ == "__main__":
    sys.exit(main())
