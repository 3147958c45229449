"""Allow ``python -m bashkeys``."""

import sys

from bashkeys.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
