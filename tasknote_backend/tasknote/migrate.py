#!/usr/bin/env python
"""Apply versioned schema migrations to the task note database."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config

from tasknote.config import settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


# PUBLIC_INTERFACE
def alembic_config(database_url: Optional[str] = None) -> Config:
    """Build an Alembic config pointing at the packaged migration scripts."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # configparser interpolation treats % specially (url-encoded passwords).
    cfg.set_main_option("sqlalchemy.url", (database_url or settings.database_url).replace("%", "%%"))
    return cfg


# PUBLIC_INTERFACE
def run_migrations(database_url: Optional[str] = None, revision: str = "head") -> None:
    """Upgrade the database to the given revision."""
    logger.info("Upgrading database schema to %s", revision)
    command.upgrade(alembic_config(database_url), revision)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Apply task note database migrations")
    parser.add_argument(
        "--database-url",
        help="SQLAlchemy database URL (defaults to TASKNOTE_DATABASE_URL resolution)",
        default=None,
    )
    parser.add_argument("--revision", help="Target revision", default="head")
    parser.add_argument(
        "--log-level",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=settings.log_level,
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run migrations once, e.g. as a deployment step."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        run_migrations(args.database_url, args.revision)
    except Exception as e:
        logger.exception("Migration failed: %s", e)
        return 1
    logger.info("Database schema is up to date")
    return 0


if __name__ == "__main__":
    sys.exit(main())
