#!/usr/bin/env python
"""Entry point for serving the task note API with uvicorn."""
import argparse
import logging
import os

import uvicorn

from tasknote.config import settings


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Task Note API server")
    parser.add_argument("--host", default=os.environ.get("TASKNOTE_HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("TASKNOTE_PORT", "8000")))
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    parser.add_argument(
        "--log-level",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=settings.log_level,
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Run the API server."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logging.getLogger(__name__).info("Starting Task Note API on %s:%s", args.host, args.port)
    uvicorn.run(
        "tasknote.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
