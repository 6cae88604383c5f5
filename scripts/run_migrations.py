#!/usr/bin/env python3
"""Upgrade the comments database schema before the API starts."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from inkwell.config import Settings
from inkwell.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def upgrade_schema(target: str = "head") -> None:
    """Apply every pending comments schema revision up to ``target``."""
    config = Config(str(ALEMBIC_INI))
    with logfire.span("comments schema upgrade", target=target):
        command.upgrade(config, target)


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        upgrade_schema()
    except Exception as e:
        logfire.error(
            "Comments schema upgrade failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The API must not boot against a half-migrated schema
        raise

    logfire.info("Comments schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
