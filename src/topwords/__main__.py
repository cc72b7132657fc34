"""Allow ``python -m topwords``."""

import sys

from .cli import main

sys.exit(main())
