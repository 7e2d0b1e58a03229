"""Allow ``python -m guided_tour``."""

from __future__ import annotations

import sys

from guided_tour.cli import main

if __name__ == "__main__":
    sys.exit(main())
