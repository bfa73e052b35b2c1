"""Allow ``python -m snipd_formatting``."""
import sys

from snipd_formatting.cli._dispatcher import main

if __name__ == "__main__":
    sys.exit(main())
