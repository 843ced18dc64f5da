"""Allow ``python -m appuri``."""

import sys

from appuri.cli import main

if __name__ == "__main__":
    sys.exit(main())
