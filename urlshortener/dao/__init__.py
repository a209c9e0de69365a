from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.dao.factory import create_dao, url_record_dao


__all__ = [
    'UrlRecordBaseDAO',
    'create_dao',
    'url_record_dao',
]
