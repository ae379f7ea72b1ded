"""Allow ``python -m mapper_pattern``."""

import sys

from mapper_pattern.main import main

sys.exit(main())
