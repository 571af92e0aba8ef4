"""Allow ``python -m boilgen``."""

import sys

from boilgen.cli.commands import main

sys.exit(main())
