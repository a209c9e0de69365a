from urlshortener.dao.base.url_record_base_dao import UrlRecordBaseDAO, newest_first


__all__ = ['UrlRecordBaseDAO', 'newest_first']
