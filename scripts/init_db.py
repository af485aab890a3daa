#!/usr/bin/env python3
"""Create the database schema with Logfire error tracking."""

import asyncio
import sys

import logfire

from huddle.config import Settings
from huddle.persistence.database import create_engine, create_schema
from huddle.util.logging import setup_logging
from huddle.util.observability import configure_logfire, instrument_sqlalchemy


async def init_db(settings: Settings) -> None:
    engine = create_engine(settings)
    instrument_sqlalchemy(engine)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create tables and indexes and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Creating database schema")
        asyncio.run(init_db(settings))
        logfire.info("Database schema ready")
        return 0

    except Exception as e:
        logfire.error(
            "Database schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
