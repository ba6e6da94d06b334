"""Allow ``python -m rustlearn`` to open the lesson menu."""

from __future__ import annotations

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
