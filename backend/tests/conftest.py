"""Root conftest: shared test configuration."""

import os

# Tests never touch the docker-compose database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
