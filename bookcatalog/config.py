"""Settings read from the environment.

Routes are served at ``/books`` unless ``BOOKCATALOG_API_PREFIX`` is set. The
browser client expects ``/api/books``, so run it with ``BOOKCATALOG_API_PREFIX=/api``.
"""

import os
from pathlib import Path

DB_PATH = os.environ.get("BOOKCATALOG_DB_PATH", str(Path.cwd() / "books.sqlite"))
DATABASE_URL = f"sqlite+aiosqlite:///{DB_PATH}"

# HTTP server settings
API_PREFIX = os.environ.get("BOOKCATALOG_API_PREFIX", "").rstrip("/")
CORS_ORIGINS = [
    o.strip() for o in os.environ.get("BOOKCATALOG_CORS_ORIGINS", "*").split(",") if o.strip()
]
HOST = os.environ.get("BOOKCATALOG_HOST", "127.0.0.1")
PORT = int(os.environ.get("BOOKCATALOG_PORT", "3000"))
LOG_LEVEL = os.environ.get("BOOKCATALOG_LOG_LEVEL", "INFO").upper()

# Base URL the MCP client talks to
API_URL = os.environ.get("BOOKCATALOG_API_URL", f"http://localhost:{PORT}")
