"""Aggregate application use cases."""

from .activity import describe_request, record_request_activity
from .deadlines import DeadlineScanResult, scan_project_deadlines

__all__ = [
    "DeadlineScanResult",
    "describe_request",
    "record_request_activity",
    "scan_project_deadlines",
]
