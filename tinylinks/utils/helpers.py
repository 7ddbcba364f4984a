"""Small helpers shared across the package.

Functions:
    as_utc(moment: datetime) -> datetime
        Return an aware UTC datetime, reading naive datetimes as UTC.
    utcnow() -> datetime
        Current time as an aware UTC datetime.
"""

from datetime import datetime, UTC


def as_utc(moment: datetime) -> datetime:
    """Normalize a datetime to aware UTC

    Naive datetimes are assumed to already be expressed in UTC, so they are
    tagged rather than converted.

    Example:
        >>> as_utc(datetime(2025, 1, 1))
        datetime.datetime(2025, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def utcnow() -> datetime:
    return datetime.now(UTC)
