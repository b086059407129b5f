"""Allow running as `python -m pseudolex`."""

import sys

from pseudolex.cli import main

sys.exit(main())
