"""Root conftest — shared test configuration."""

import os

# Deterministic settings; never touch a real database or secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
