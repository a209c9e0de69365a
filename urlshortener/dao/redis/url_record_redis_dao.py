"""Data Access Object (DAO) implementation for managing URL records in Redis

This module provides a Redis-based implementation of UrlRecordBaseDAO.

Key layout (see RedisKeySchema):
    <prefix>:urls:<short code>   HASH  id, original_url, short_code, created_at, clicks
    <prefix>:urls:index          ZSET  short codes scored by insertion sequence
    <prefix>:urls:sequence       STR   insertion sequence counter

Responsibilities:
    - Connect to the server described by the 'redis' backend options and PING it;
    - Insert records only if their short code is free (WATCH/MULTI);
    - Increment click counters server-side without lost updates (Lua script);
    - Delete a record and its index entry in a single transaction;
    - Report an unreachable server as DataStoreError.

Classes:
    UrlRecordRedisDAO:
        DAO for storing and retrieving UrlRecordModel in a Redis datastore.

Example:
    >>> dao = UrlRecordRedisDAO.from_options({'host': 'localhost'}, prefix='urlshortener:dev')
    >>> record = dao.create('https://example.com/page')
    >>> dao.increment_clicks(record.short_code).clicks
    1
"""

import logging
import functools
from typing import Any
from collections.abc import Callable

import redis
from beartype import beartype

from urlshortener.types import BackendOptions
from urlshortener.models import UrlRecordModel
from urlshortener.dao.base import UrlRecordBaseDAO, newest_first
from urlshortener.dao.redis.redis_key_schema import RedisKeySchema
from urlshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError


logger = logging.getLogger(__name__)


# Returns the updated hash as a flat [field, value, ...] list, or nil if the record doesn't exist
INCREMENT_CLICKS_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 0 then
    return false
end
redis.call('HINCRBY', KEYS[1], 'clicks', 1)
return redis.call('HGETALL', KEYS[1])
"""


def redis_endpoint(client: redis.Redis) -> str:
    """Describe the server a client talks to as '<host>:<port>/<db>'"""
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def translate_connection_errors[F: Callable[..., Any]](method: F) -> F:
    """Decorator: raise DataStoreError when the DAO's Redis server can't be reached

    Connection and timeout errors are chained onto the DataStoreError. Any
    other Redis error (e.g. WatchError, ResponseError) propagates unchanged.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_endpoint(self.redis)}.") from e

    return wrapper


class UrlRecordRedisDAO(UrlRecordBaseDAO):
    """Redis-based Data Access Object (DAO) for managing URL records

    Attributes:
        redis (redis.Redis):
            Client used to talk to the Redis server. Responses must be decoded
            to str (decode_responses=True).
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Example:
        >>> dao = UrlRecordRedisDAO(redis.Redis(decode_responses=True), prefix='urlshortener:test')
        >>> dao.insert(record)
        <UrlRecordRedisDAO>
        >>> dao.lookup(record.short_code).original_url
        'https://example.com'
    """

    def __init__(self, redis_client: redis.Redis, prefix: str | None = None, **kwargs):
        """Attach the DAO to a Redis client and check that the server answers

        Args:
            redis_client (redis.Redis):
                Client with decode_responses=True.
            prefix (str | None):
                Namespace for every key, e.g. 'urlshortener:prod'.
            **kwargs:
                Forwarded to UrlRecordBaseDAO (shortcode_generator, max_attempts).

        Raises:
            DataStoreError:
                If the server doesn't answer PING.
        """
        super().__init__(**kwargs)
        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self.ping()
        self._increment_clicks_script = self.redis.register_script(INCREMENT_CLICKS_SCRIPT)

    @classmethod
    def from_options(cls, options: BackendOptions, prefix: str | None = None, **kwargs) -> 'UrlRecordRedisDAO':
        """Connect to the server described by a 'redis' backend section

        Recognized options: host, port, db, username, password. Port and db
        may be given as strings.
        """
        client = redis.Redis(
            host=options.get('host', 'localhost'),
            port=int(options.get('port', 6379)),
            db=int(options.get('db', 0)),
            username=options.get('username'),
            password=options.get('password'),
            decode_responses=True,
        )
        logger.debug('Connecting to Redis.', extra={'host': options.get('host', 'localhost'), 'db': options.get('db', 0)})
        return cls(client, prefix=prefix, **kwargs)

    @translate_connection_errors
    def ping(self) -> None:
        self.redis.ping()

    @translate_connection_errors
    @beartype
    def insert(self, record: UrlRecordModel, **kwargs) -> 'UrlRecordRedisDAO':
        """Insert a URL record into Redis unless its short code is taken

        The record key is WATCHed between the existence check and the MULTI
        block. If another client writes the key in between, the transaction
        aborts and the insert is reported as a collision.

        Raises:
            ShortURLAlreadyExistsError:
                If a record with the same short code exists (or was just created).
            DataStoreError:
                If a Redis connection issue occurs during the transaction.
        """
        record_key = self.keys.record_key(record.short_code)

        with self.redis.pipeline() as pipe:
            try:
                pipe.watch(record_key)
                if pipe.exists(record_key):
                    raise ShortURLAlreadyExistsError(f"Short URL with code '{record.short_code}' already exists.")

                sequence = pipe.incr(self.keys.sequence_key())
                pipe.multi()
                pipe.hset(record_key, mapping=record.to_dict())
                pipe.zadd(self.keys.index_key(), {record.short_code: sequence})
                pipe.execute()
            except redis.exceptions.WatchError as e:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{record.short_code}' was created concurrently.") from e

        return self

    @translate_connection_errors
    @beartype
    def lookup(self, short_code: str, **kwargs) -> UrlRecordModel | None:
        data = self.redis.hgetall(self.keys.record_key(short_code))
        if not data:
            return None
        return UrlRecordModel.from_dict(data)

    @translate_connection_errors
    @beartype
    def increment_clicks(self, short_code: str, **kwargs) -> UrlRecordModel | None:
        """Increment the click counter of a record inside a Lua script

        Scripts run atomically on the Redis server, so concurrent increments
        never lose updates and a record deleted beforehand is not recreated.
        """
        flat = self._increment_clicks_script(keys=[self.keys.record_key(short_code)])
        if not flat:
            return None

        fields = iter(flat)
        return UrlRecordModel.from_dict(dict(zip(fields, fields)))

    @translate_connection_errors
    @beartype
    def delete(self, short_code: str, **kwargs) -> bool:
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.delete(self.keys.record_key(short_code))
            pipe.zrem(self.keys.index_key(), short_code)
            deleted, _ = pipe.execute()
        return deleted > 0

    @translate_connection_errors
    def list_all(self, **kwargs) -> list[UrlRecordModel]:
        short_codes = self.redis.zrange(self.keys.index_key(), 0, -1)

        with self.redis.pipeline(transaction=True) as pipe:
            for short_code in short_codes:
                pipe.hgetall(self.keys.record_key(short_code))
            rows = pipe.execute()

        # Records deleted between ZRANGE and HGETALL come back empty
        return newest_first(UrlRecordModel.from_dict(row) for row in rows if row)
