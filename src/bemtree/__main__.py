"""Allow ``python -m bemtree``."""

import sys

from bemtree.cli import main

if __name__ == "__main__":
    sys.exit(main())
