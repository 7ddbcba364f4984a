from dataclasses import dataclass, field
from datetime import datetime, UTC

from tinylinks.utils.helpers import as_utc


@dataclass(frozen=True)
class URLMappingModel:
    """Represent a short code to long URL mapping.

    Attributes:
        shortcode (str):
            The unique short identifier representing the shortened URL.
        target (str):
            The original long URL that the short code resolves to.
        created_at (datetime):
            Creation time (UTC). Defaults to the moment of construction.
        expires_at (Optional[datetime]):
            Time after which the mapping no longer resolves. None means the
            mapping never expires. Naive datetimes are read as UTC.

    Expiry is a derived predicate: fields never change after construction and
    an expired mapping stays in the store until the process exits.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> mapping = URLMappingModel(
        ...     shortcode="abc123",
        ...     target="https://example.com/article/123",
        ...     expires_at=datetime.now(UTC) + timedelta(days=30),
        ... )
        >>> mapping.is_expired()
        False
    """

    shortcode: str
    target: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    expires_at: datetime | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        """True if `expires_at` is set and `now` is strictly past it."""
        if self.expires_at is None:
            return False
        now = datetime.now(UTC) if now is None else now
        return as_utc(now) > as_utc(self.expires_at)

    def is_active(self, now: datetime | None = None) -> bool:
        return not self.is_expired(now)
