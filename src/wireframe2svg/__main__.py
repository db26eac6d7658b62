"""Allow ``python -m wireframe2svg``."""

import sys

from wireframe2svg.cli import main

sys.exit(main())
