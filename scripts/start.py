#!/usr/bin/env python3
"""
Production startup script.

1. Loads .env and validates PORT (required; exits with status 1 when missing)
2. Runs migrations (release.py)
3. Starts gunicorn (replaces this process via os.execvp)

Usage:
    python scripts/start.py

gunicorn runs a single sync worker: the in-memory customers live in the worker
process, so more workers would each see a different list.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logger = logging.getLogger("start")


def validate_port(raw: str | None) -> int:
    port = (raw or "").strip()
    if not port:
        logger.error("PORT is not defined in the environment or .env file.")
        sys.exit(1)
    try:
        port_int = int(port)
        if port_int < 1 or port_int > 65535:
            raise ValueError("Port out of range")
    except ValueError:
        logger.error("Invalid PORT value '%s'. Must be integer 1-65535.", port)
        sys.exit(1)
    return port_int


def gunicorn_argv(port: int) -> list[str]:
    return [
        "gunicorn",
        "app.wsgi:app",
        "--bind", f"0.0.0.0:{port}",
        "--workers", "1",
        "--timeout", "60",
        "--access-logfile", "-",
        "--error-logfile", "-",
    ]


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")
    load_dotenv(ROOT / ".env")

    port = validate_port(os.environ.get("PORT"))
    logger.info("PORT=%s validated", port)

    from scripts.release import run_release
    try:
        run_release()
    except Exception:
        logger.exception("Release failed")
        sys.exit(1)

    logger.info("Starting gunicorn on 0.0.0.0:%s", port)
    argv = gunicorn_argv(port)
    os.execvp(argv[0], argv)


if __name__ == "__main__":
    main()
