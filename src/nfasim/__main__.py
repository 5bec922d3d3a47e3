"""Allow ``python -m nfasim``."""

import sys

from nfasim.cli import main

sys.exit(main())
