from urlshortener.dao.redis.redis_key_schema import RedisKeySchema
from urlshortener.dao.redis.url_record_redis_dao import UrlRecordRedisDAO


__all__ = [
    'RedisKeySchema',
    'UrlRecordRedisDAO',
]
