"""Clock and timezone helpers.

All timestamps are stored as naive values expressed in the application
timezone (``APP_TIMEZONE``) and handled as aware values everywhere else.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from projecthub.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE: Final[str] = "America/Bogota"
_UTC_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_timezone(name: str) -> tzinfo:
    """Turn an IANA zone name or a ``UTC+HH:MM`` offset into a ``tzinfo``.

    Raises ``ValueError`` when ``name`` is neither.
    """

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    match = _UTC_OFFSET.match(name)
    if match is None:
        raise ValueError(f"Unknown timezone '{name}'")
    offset = timedelta(hours=int(match["hours"]), minutes=int(match["minutes"] or 0))
    return timezone(-offset if match["sign"] == "-" else offset)


@lru_cache(maxsize=1)
def app_timezone() -> tzinfo:
    """Timezone used for deadlines, stored timestamps and calendar days."""

    name = (get_settings().app_timezone or "").strip() or DEFAULT_TIMEZONE
    try:
        return parse_timezone(name)
    except ValueError:
        logger.warning("APP_TIMEZONE %r is not valid, using %s", name, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)


def local_now() -> datetime:
    return datetime.now(tz=app_timezone())


def local_now_naive() -> datetime:
    """Current wall-clock time in the app timezone, ready for a DateTime column."""

    return to_storage(local_now())


def localize(value: datetime | None) -> datetime | None:
    """Return ``value`` as an aware datetime in the app timezone.

    Naive values are read as app-local wall-clock time, which is how they are
    stored.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=app_timezone())
    return value.astimezone(app_timezone())


def to_storage(value: datetime | None) -> datetime | None:
    localized = localize(value)
    return localized.replace(tzinfo=None) if localized is not None else None


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return the ``[start, end)`` range covering ``day`` in the app timezone."""

    start = datetime.combine(day, time.min, tzinfo=app_timezone())
    return start, start + timedelta(days=1)
