"""In-memory Data Access Object (DAO) for URL records

Records live in a dict keyed by short code. The dict preserves insertion
order, which `list_all()` uses to break `created_at` ties. Every operation
holds a single store-wide re-entrant lock, so the check-then-insert of
`insert()` and the read-increment-write of `increment_clicks()` are atomic.

Classes:
    UrlRecordMemoryDAO:
        DAO storing UrlRecordModel instances in process memory.

Example:
    >>> dao = UrlRecordMemoryDAO()
    >>> record = dao.create('https://example.com/page')
    >>> dao.lookup(record.short_code) == record
    True
"""

import threading
from contextlib import contextmanager
from dataclasses import replace
from collections.abc import Iterable, Iterator

from beartype import beartype

from urlshortener.models import UrlRecordModel
from urlshortener.dao.base import UrlRecordBaseDAO, newest_first
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError


class UrlRecordMemoryDAO(UrlRecordBaseDAO):
    """Process-local URL record store

    Attributes:
        _records (dict[str, UrlRecordModel]):
            Live records keyed by short code, in insertion order.
        _lock (threading.RLock):
            Serializes all reads and mutations.
    """

    def __init__(self, records: Iterable[UrlRecordModel] = (), **kwargs):
        """Initialize the store, optionally seeded with existing records

        Args:
            records (Iterable[UrlRecordModel]):
                Records to preload, in insertion order.
            **kwargs:
                Forwarded to UrlRecordBaseDAO (shortcode_generator, max_attempts).
        """
        super().__init__(**kwargs)
        self._lock = threading.RLock()
        self._records: dict[str, UrlRecordModel] = {record.short_code: record for record in records}

    @contextmanager
    def _transaction(self) -> Iterator[dict[str, UrlRecordModel]]:
        """Hold the store lock and yield the table to mutate in place"""
        with self._lock:
            yield self._records

    @beartype
    def insert(self, record: UrlRecordModel, **kwargs) -> 'UrlRecordMemoryDAO':
        with self._transaction() as records:
            if record.short_code in records:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{record.short_code}' already exists.")
            records[record.short_code] = record
        return self

    @beartype
    def lookup(self, short_code: str, **kwargs) -> UrlRecordModel | None:
        with self._lock:
            return self._records.get(short_code)

    @beartype
    def increment_clicks(self, short_code: str, **kwargs) -> UrlRecordModel | None:
        with self._transaction() as records:
            record = records.get(short_code)
            if record is None:
                return None

            # Reassigning an existing key keeps its insertion position
            updated = replace(record, clicks=record.clicks + 1)
            records[short_code] = updated
        return updated

    @beartype
    def delete(self, short_code: str, **kwargs) -> bool:
        with self._transaction() as records:
            return records.pop(short_code, None) is not None

    def list_all(self, **kwargs) -> list[UrlRecordModel]:
        with self._lock:
            return newest_first(self._records.values())
