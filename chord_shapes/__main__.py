"""Run the chord-shapes CLI with ``python -m chord_shapes``."""

import sys

from chord_shapes.cli import main

sys.exit(main())
