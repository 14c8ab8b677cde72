"""Scan upcoming project deadlines and create reminders and notifications."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError

from projecthub.application.use_cases.deadlines import (
    DeadlineScanResult,
    scan_project_deadlines,
)
from projecthub.config import get_settings
from projecthub.infrastructure.database import SessionLocal, initialize_database

COMMAND_NAME = "project:check-deadlines"

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="projecthub-check-deadlines",
        description="Check project deadlines and create reminders/notifications.",
    )
    return parser.parse_args(argv)


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_deadline_check() -> DeadlineScanResult:
    """Run one deadline scan in its own session.

    Database errors are logged and re-raised so the caller can report failure.
    """

    session = SessionLocal()
    try:
        return scan_project_deadlines(session)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("%s failed while saving reminders", COMMAND_NAME)
        raise
    finally:
        session.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the scheduler; returns the process exit status."""

    parse_args(argv)
    configure_logging()
    initialize_database()

    try:
        result = run_deadline_check()
    except SQLAlchemyError:
        return 1

    print(
        f"Checked {result.projects_checked} projects. "
        f"Created reminders for {result.projects_notified} projects."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
