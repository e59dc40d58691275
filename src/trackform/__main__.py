"""Allow ``python -m trackform``."""

import sys

from trackform.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
