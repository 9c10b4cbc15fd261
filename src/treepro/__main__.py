"""Allow ``python -m treepro``."""

import sys

from treepro.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
