from __future__ import annotations

import os

# Keep test runs from writing log files into the working tree.
os.environ.setdefault("CONDUCTOR_LOG_DIR", "")
