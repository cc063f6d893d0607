#!/usr/bin/env python
"""
Run the MultiProfile API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode
"""

import argparse
import logging
import sys

import uvicorn

from shared.config import get_settings
from shared.exceptions import ConfigurationError
from shared.logging import setup_logging

logger = logging.getLogger("run_api")


def main():
    parser = argparse.ArgumentParser(description="Run MultiProfile API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        settings.require_supabase()
    except ConfigurationError as e:
        logger.error("%s", e.message)
        sys.exit(1)

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
    )


if __name__ == "__main__":
    main()
