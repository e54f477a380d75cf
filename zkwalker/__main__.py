"""Allow ``python -m zkwalker``."""

import sys

from .cli import main

sys.exit(main())
