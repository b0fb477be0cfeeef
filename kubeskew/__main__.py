"""Allow ``python -m kubeskew``."""

import sys

from kubeskew.main import main

if __name__ == "__main__":
    sys.exit(main())
