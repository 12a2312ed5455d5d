from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime


def format_http_date(value: datetime) -> str:
    """Format ``value`` as an IMF-fixdate, e.g. ``Thu, 01 Jan 1970 00:00:00 GMT``.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)
