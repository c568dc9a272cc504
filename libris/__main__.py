import logging
import subprocess
import sys
from pathlib import Path

import uvicorn

from libris.config import DB_PATH, HOST, LOG_LEVEL, PORT


def run_migrations():
    """Run Alembic migrations before serving."""
    Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)

    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        capture_output=False,
    )
    if result.returncode != 0:
        sys.exit(1)


def main():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_migrations()
    uvicorn.run("libris.app:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
