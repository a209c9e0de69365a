from urlshortener.dao.file.url_record_file_dao import UrlRecordFileDAO


__all__ = ['UrlRecordFileDAO']
