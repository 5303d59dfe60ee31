"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or a production secret
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")
os.environ.setdefault("LOG_FORMAT", "text")
