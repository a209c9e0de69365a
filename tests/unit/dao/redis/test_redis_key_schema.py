"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Key generation without prefix
2. Key generation with custom prefix
3. Invalid prefix types raise TypeError
"""

import pytest

from urlshortener.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Default prefix behavior
# -------------------------------


@pytest.mark.parametrize('short_code, expected', [('abc-123_', 'urls:abc-123_'), ('XyZ789', 'urls:XyZ789')])
def test_record_key(short_code, expected):
    assert RedisKeySchema().record_key(short_code) == expected


def test_index_and_sequence_keys():
    keys = RedisKeySchema()
    assert keys.index_key() == 'urls:index'
    assert keys.sequence_key() == 'urls:sequence'


# -------------------------------
# 2. Custom prefix behavior
# -------------------------------


def test_prefixed_keys():
    keys = RedisKeySchema(prefix='urlshortener:dev')
    assert keys.record_key('abc') == 'urlshortener:dev:urls:abc'
    assert keys.index_key() == 'urlshortener:dev:urls:index'
    assert keys.sequence_key() == 'urlshortener:dev:urls:sequence'


# -------------------------------
# 3. Invalid prefix types
# -------------------------------


@pytest.mark.parametrize('prefix', [123, ['app'], {'app': 'dev'}])
def test_invalid_prefix(prefix):
    with pytest.raises(TypeError, match='Prefix must be of type string'):
        RedisKeySchema(prefix=prefix)
