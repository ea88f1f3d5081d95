"""Entry point for ``python -m experiment_demo``."""

import sys

from experiment_demo.driver import main

sys.exit(main())
