"""Allow running the generator with ``python -m ontogen``."""

import sys

from ontogen.main import main

sys.exit(main())
