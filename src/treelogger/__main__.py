"""Allow ``python -m treelogger``."""

import sys

from treelogger.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
