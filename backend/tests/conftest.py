"""Root conftest — shared test configuration."""

import os

# Keep test output quiet and independent of any local .env
os.environ.setdefault("STATUSLAB_LOG_LEVEL", "WARNING")
os.environ.setdefault("STATUSLAB_LOG_FORMAT", "text")
