"""Allow ``python -m copy_confirmer``."""

import sys

from copy_confirmer.ui.cli.cli import main

sys.exit(main())
