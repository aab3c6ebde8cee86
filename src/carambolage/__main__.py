"""Run the headless demo with ``python -m carambolage``."""

import sys

from carambolage.cli import main

sys.exit(main())
