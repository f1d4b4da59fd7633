"""Entry point for ``python -m demofilter``."""

import sys

from demofilter.presentation.cli import main

sys.exit(main())
