"""Abstract base class for URL record data access objects (DAOs).

This class establishes a consistent contract for all URL record DAO
implementations, regardless of the underlying storage mechanism
(in-memory table, JSON snapshot file, Redis).

Responsibilities:
    - Provide an interface for inserting, resolving, counting and deleting UrlRecordModel objects.
    - Own short code uniqueness: `create()` regenerates colliding codes.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlshortener.dao.memory import UrlRecordMemoryDAO

        >>> dao = UrlRecordMemoryDAO()
        >>> record = dao.create('https://example.com/blog/article-123')
        >>> record.clicks
        0

        >>> dao.increment_clicks(record.short_code).clicks
        1

        >>> dao.delete(record.short_code)
        True
        >>> dao.lookup(record.short_code) is None
        True
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from operator import attrgetter
from datetime import datetime, UTC

from urlshortener.constants import Shortcode
from urlshortener.models import UrlRecordModel
from urlshortener.types import ShortcodeGenerator
from urlshortener.utils.shortener import generate_shortcode, generate_record_id
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortCodeGenerationExhaustedError


logger = logging.getLogger(__name__)


class UrlRecordBaseDAO(ABC):
    """Interface for URL record data access objects (DAOs).

    Methods:
        create(original_url: str, **kwargs) -> UrlRecordModel:
            Generate a unique short code and persist a new record.
            Raises ShortCodeGenerationExhaustedError if every attempt collided.
            Raises DataStoreError on storage failure.

        insert(record: UrlRecordModel, **kwargs) -> UrlRecordBaseDAO:
            Atomically insert a record unless its short code is taken.
            Raises ShortURLAlreadyExistsError if the short code already exists.
            Raises DataStoreError on storage failure.

        lookup(short_code: str, **kwargs) -> UrlRecordModel | None:
            Retrieve a record by short code. Returns None if not found.

        increment_clicks(short_code: str, **kwargs) -> UrlRecordModel | None:
            Atomically increment the click counter. Returns None if not found.

        delete(short_code: str, **kwargs) -> bool:
            Remove a record. Returns False if it didn't exist.

        list_all(**kwargs) -> list[UrlRecordModel]:
            Return all records, newest first.

    Subclassing:
        Datastore-specific implementations (e.g., UrlRecordMemoryDAO or
        UrlRecordRedisDAO) must extend this class and implement all
        abstract methods. `create()` is shared and relies on `insert()`
        being atomic with respect to concurrent callers.
    """

    def __init__(
        self,
        shortcode_generator: ShortcodeGenerator | None = None,
        max_attempts: int = Shortcode.MAX_ATTEMPTS,
    ):
        """Initialize short code generation for the DAO

        Args:
            shortcode_generator (ShortcodeGenerator | None):
                Callable returning a fresh short code. Defaults to generate_shortcode().

            max_attempts (int):
                Number of codes tried before giving up. Defaults to 5.
        """
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.shortcode_generator = shortcode_generator or generate_shortcode
        self.max_attempts = max_attempts

    def create(self, original_url: str, **kwargs) -> UrlRecordModel:
        """Persist a new record for an already normalized URL

        Args:
            original_url (str):
                Normalized absolute URL.

        Returns:
            UrlRecordModel: The stored record (clicks == 0).

        Raises:
            ShortCodeGenerationExhaustedError:
                If all `max_attempts` generated short codes were already taken.
            DataStoreError:
                If there is an error in the data store.
        """
        for attempt in range(1, self.max_attempts + 1):
            record = UrlRecordModel(
                id=generate_record_id(),
                original_url=original_url,
                short_code=self.shortcode_generator(),
                created_at=datetime.now(UTC),
            )
            try:
                self.insert(record)
            except ShortURLAlreadyExistsError:
                logger.warning(
                    'Short code collision. Regenerating short code.',
                    extra={'shortcode': record.short_code, 'attempt': attempt},
                )
                continue

            logger.debug('Created URL record.', extra={'shortcode': record.short_code, 'recordId': record.id})
            return record

        logger.error('Exhausted short code generation attempts.', extra={'attempts': self.max_attempts})
        raise ShortCodeGenerationExhaustedError(f'Could not generate a unique short code in {self.max_attempts} attempts.')

    @abstractmethod
    def insert(self, record: UrlRecordModel, **kwargs) -> 'UrlRecordBaseDAO':
        """Insert a new UrlRecordModel into the data store.

        The existence check and the write must be atomic: two concurrent
        inserts of the same short code never both succeed.

        Returns:
            UrlRecordBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a record with the same short code already exists.
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def lookup(self, short_code: str, **kwargs) -> UrlRecordModel | None:
        """Retrieve a UrlRecordModel by its short code.

        Returns:
            UrlRecordModel | None: The record if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def increment_clicks(self, short_code: str, **kwargs) -> UrlRecordModel | None:
        """Atomically increment the click counter of a record.

        Concurrent increments on the same short code are never lost. A
        missing record is not created.

        Returns:
            UrlRecordModel | None: The updated record, or None if not found.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, short_code: str, **kwargs) -> bool:
        """Remove a record by short code.

        Idempotent: deleting a missing record returns False and writes nothing.

        Returns:
            bool: True if a record was removed, False otherwise.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def list_all(self, **kwargs) -> list[UrlRecordModel]:
        """Return every live record ordered by `created_at` descending.

        Ties are broken by insertion order, most recently inserted first.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass


def newest_first(records: Iterable[UrlRecordModel]) -> list[UrlRecordModel]:
    """Order records given in insertion order by `created_at` descending

    Sorting is stable, so reversing first puts later insertions ahead of
    earlier ones that share a timestamp.
    """
    return sorted(reversed(list(records)), key=attrgetter('created_at'), reverse=True)
