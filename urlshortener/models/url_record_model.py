from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Any


@dataclass(frozen=True)
class UrlRecordModel:
    """Represent a stored short code to destination URL mapping.

    Attributes:
        id (str):
            Process-unique record identifier, assigned at creation.
        original_url (str):
            The normalized absolute URL the short code redirects to.
        short_code (str):
            The unique short identifier used as the lookup key.
        created_at (datetime):
            Timezone-aware UTC creation timestamp.
        clicks (int):
            Number of resolved visits. Only ever increases.

    Example:
        >>> from datetime import datetime, UTC
        >>> record = UrlRecordModel(
        ...     id='V1StGXR8_Z5jdHi6B-myT',
        ...     original_url='https://example.com/article/123',
        ...     short_code='abc-123_',
        ...     created_at=datetime(2025, 10, 15, 12, 0, tzinfo=UTC),
        ... )
        >>> record.clicks
        0
        >>> record.to_dict()['created_at']
        '2025-10-15T12:00:00.000Z'
    """

    id: str
    original_url: str
    short_code: str
    created_at: datetime
    clicks: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the wire/storage representation of this record."""
        # fmt: off
        created_at = self.created_at.astimezone(UTC) \
                                    .isoformat(timespec='milliseconds') \
                                    .replace('+00:00', 'Z')
        # fmt: on
        return {
            'id': self.id,
            'original_url': self.original_url,
            'short_code': self.short_code,
            'created_at': created_at,
            'clicks': self.clicks,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'UrlRecordModel':
        """Build a record from its wire/storage representation.

        Accepts values as returned by redis (all strings) as well as decoded JSON.

        Raises:
            KeyError: If a field is missing.
            ValueError: If `created_at` or `clicks` can't be parsed.
        """
        created_at = datetime.fromisoformat(data['created_at'])
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)

        return cls(
            id=data['id'],
            original_url=data['original_url'],
            short_code=data['short_code'],
            created_at=created_at,
            clicks=int(data['clicks']),
        )
