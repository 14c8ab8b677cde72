"""
Daily scheduler for the project deadline check.

Runs the deadline scan once a day at the configured wall-clock time in the
application timezone.
"""

from __future__ import annotations

import logging
import sys

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from projecthub.commands.check_deadlines import configure_logging, run_deadline_check
from projecthub.config import get_settings
from projecthub.infrastructure.database import initialize_database
from projecthub.utils import app_timezone

DEADLINE_JOB_ID = "project_deadline_check"

logger = logging.getLogger(__name__)


def deadline_check_job() -> None:
    """Scheduled job: scan deadlines, letting failures reach APScheduler's listeners."""

    result = run_deadline_check()
    logger.info(
        "Deadline check complete: %s projects checked, %s notified, "
        "%s notifications and %s reminders created",
        result.projects_checked,
        result.projects_notified,
        result.notifications_created,
        result.reminders_created,
    )


def build_scheduler() -> BlockingScheduler:
    """Create the scheduler with the daily deadline job registered."""

    settings = get_settings()
    timezone = app_timezone()
    scheduler = BlockingScheduler(timezone=timezone)
    scheduler.add_job(
        deadline_check_job,
        CronTrigger(
            hour=settings.deadline_check_hour,
            minute=settings.deadline_check_minute,
            timezone=timezone,
        ),
        id=DEADLINE_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    return scheduler


def main() -> int:
    configure_logging()
    initialize_database()

    settings = get_settings()
    scheduler = build_scheduler()
    logger.info(
        "Scheduler started: deadline check daily at %02d:%02d",
        settings.deadline_check_hour,
        settings.deadline_check_minute,
    )
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
