#!/usr/bin/env python3
"""
Run the review proxy API with uvicorn.

Host and port default to HOST/PORT from the environment (.env is loaded);
set USE_MOCK=true to serve the fixtures under data/mock instead of the
upstream review API.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from src.utils.config_loader import load_settings


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Run the review proxy API server.")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Listen port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger("run_server")
    logger.info("Backend starting on http://%s:%s (mode=%s)", args.host, args.port, settings.mode)

    try:
        uvicorn.run(
            "src.api.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level="debug" if args.verbose else settings.log_level.lower(),
        )
    except OSError as e:
        logger.error("Error starting server: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
