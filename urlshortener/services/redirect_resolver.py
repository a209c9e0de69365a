"""Redirect resolution: record the visit and tell the caller where to go"""

import logging

from urlshortener.models import UrlRecordModel
from urlshortener.dao.base import UrlRecordBaseDAO


logger = logging.getLogger(__name__)


class RedirectResolver:
    """Resolve short codes to destinations, counting each visit"""

    def __init__(self, dao: UrlRecordBaseDAO):
        self.dao = dao

    def resolve(self, short_code: str) -> UrlRecordModel | None:
        """Increment the click counter of a short code and return its record

        Lookup and increment happen as one atomic DAO operation, so a record
        deleted before the visit is reported as not found and never counted.

        Returns:
            UrlRecordModel | None: Record with the incremented click count, or None if unknown.
        """
        record = self.dao.increment_clicks(short_code)
        if record is None:
            logger.debug('Short code not found.', extra={'shortcode': short_code})
            return None

        logger.debug('Resolved short code.', extra={'shortcode': short_code, 'clicks': record.clicks})
        return record
