"""Global pytest configuration."""

import os

# Keep tests offline and on the in-memory request log before any imports
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REQUEST_LOG_BACKEND", "memory")
os.environ["OPENAI_API_KEY"] = ""
