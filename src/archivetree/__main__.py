from __future__ import annotations

import sys

from archivetree.main import main

sys.exit(main())
