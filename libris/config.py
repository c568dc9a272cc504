import os
from pathlib import Path

DB_PATH = os.environ.get("LIBRIS_DB_PATH", str(Path.cwd() / "libris.db"))
DATABASE_URL = os.environ.get("LIBRIS_DATABASE_URL", f"sqlite+aiosqlite:///{DB_PATH}")

LOG_LEVEL = os.environ.get("LIBRIS_LOG_LEVEL", "INFO")

HOST = os.environ.get("LIBRIS_HOST", "127.0.0.1")
PORT = int(os.environ.get("LIBRIS_PORT", "8000"))

# Pagination
DEFAULT_PAGE_SIZE = int(os.environ.get("LIBRIS_DEFAULT_PAGE_SIZE", "10"))
MAX_PAGE_SIZE = int(os.environ.get("LIBRIS_MAX_PAGE_SIZE", "100"))
