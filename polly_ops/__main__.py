"""Allow running as `python -m polly_ops`."""

import sys

from polly_ops.cli.main import main

sys.exit(main())
