"""src/urlsplit/__main__.py

Allow running Urlsplit as ``python -m urlsplit``.
"""

import sys

from urlsplit.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
