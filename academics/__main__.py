"""Allow running the package with ``python -m academics``."""

import sys

from .cli import main

sys.exit(main())
