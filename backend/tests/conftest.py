"""Root conftest — shared test configuration."""

import os

# Keep tests off any real database configured in the environment
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
