"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLAlreadyExistsError:
        Raised when attempting to insert a record whose short code is taken.

    ShortCodeGenerationExhaustedError:
        Raised when every regenerated short code collided with an existing record.

    DataStoreError:
        Raised when there is an error in the data store (e.g., I/O failure, corrupt snapshot, connection issues).

NOTE:
    A missing record is not an error. Lookups return None instead.

Example:
    >>> from urlshortener.dao.exceptions import DataStoreError
    >>> raise DataStoreError("Can't write URL records to data/urls.json.")
    Traceback (most recent call last):
        ...
    urlshortener.dao.exceptions.DataStoreError: Can't write URL records to data/urls.json.
"""

from urlshortener.exceptions import UrlShortenerError


class DAOError(UrlShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLAlreadyExistsError(DAOError):
    """Raised when inserting a UrlRecordModel whose short code already exists in the data store."""

    error_code = 'dao:short_url_already_exists_error'


class ShortCodeGenerationExhaustedError(DAOError):
    """Raised when short code regeneration retries are exhausted."""

    error_code = 'dao:short_code_generation_exhausted_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include I/O failures, corrupt snapshots and connection issues.
    """

    error_code = 'dao:data_store_error'
