"""Allow ``python -m cl_gallery``."""

import sys

from cl_gallery.cli.main import main

sys.exit(main())
