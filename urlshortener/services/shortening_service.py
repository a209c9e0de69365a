"""URL shortening service

Classes:
    ShorteningService:
        Validate and normalize a raw URL, then persist a new record.

Example:
    >>> from urlshortener.dao.memory import UrlRecordMemoryDAO
    >>> service = ShorteningService(UrlRecordMemoryDAO())
    >>> service.shorten('example.com').original_url
    'https://example.com'
"""

import logging

from urlshortener.models import UrlRecordModel
from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.utils.urls import normalize_url, validate_url


logger = logging.getLogger(__name__)


class ShorteningService:
    """Turn user-submitted URLs into stored short URL records"""

    def __init__(self, dao: UrlRecordBaseDAO):
        self.dao = dao

    def shorten(self, raw_url: str) -> UrlRecordModel:
        """Shorten a raw URL string

        Procedure:
        - Step 1: Trim whitespace (empty input is rejected)
        - Step 2: Prepend 'https://' if no http(s) scheme is present
        - Step 3: Validate the result as an absolute URL
        - Step 4: Persist a new record via the DAO

        Args:
            raw_url (str):
                URL as submitted by the client.

        Returns:
            UrlRecordModel: The newly stored record.

        Raises:
            EmptyInputError:
                If the URL is empty or whitespace only.
            InvalidUrlError:
                If the normalized URL is malformed.
            ShortCodeGenerationExhaustedError, DataStoreError:
                Propagated from the DAO.
        """
        url = validate_url(normalize_url(raw_url))
        record = self.dao.create(url)

        logger.info('Shortened URL.', extra={'shortcode': record.short_code, 'originalUrl': url})
        return record
