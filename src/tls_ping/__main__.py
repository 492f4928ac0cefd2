"""Allow running tls-ping as ``python -m tls_ping``."""

import sys

from tls_ping.cli import main

sys.exit(main())
