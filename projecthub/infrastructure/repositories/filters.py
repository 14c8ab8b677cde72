"""Query helpers shared by the repositories."""

from typing import Any

from sqlalchemy.sql.elements import ColumnElement


def matches(column: Any, value: Any) -> ColumnElement[bool]:
    """Return an equality clause for ``column`` that treats ``None`` as ``IS NULL``."""

    if value is None:
        return column.is_(None)
    return column == value


__all__ = ["matches"]
