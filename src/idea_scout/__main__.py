"""Allow ``python -m idea_scout``."""

import sys

from idea_scout.cli import main

sys.exit(main())
