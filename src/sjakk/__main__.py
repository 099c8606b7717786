"""Allow ``python -m sjakk``."""

import sys

from sjakk.cli import main

sys.exit(main())
