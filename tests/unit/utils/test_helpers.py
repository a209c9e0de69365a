"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. base_url() correct extraction
   - 1.1. Ensures URLs include the stage (e.g., `/Prod`) when invoked via AWS.
   - 1.2. Ensures URLs do NOT include stage information for custom domains.
   - 1.3. Confirms a proper localhost fallback is returned when no domain is present.

2. get_short_url() retrieves short URL string representation

3. running_locally() detects local execution

4. guarantee_500_response() decorator behavior
   - 4.1. Faulty handlers respond with 500 when not running locally.
   - 4.2. Faulty handlers re-raise when running locally.
   - 4.3. Healthy handlers are passed through.
"""

import json

import pytest

from urlshortener.dao.exceptions import DataStoreError
from urlshortener.constants import ENV
from urlshortener.utils.helpers import base_url, get_short_url, running_locally, guarantee_500_response


# -------------------------------
# 1.1. AWS default domain handling
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Dev', 'https://abc123.execute-api.us-east-1.amazonaws.com/Dev'),
        ('abc123.execute-api.us-east-1.amazonaws.com', 'Prod', 'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'),
    ],
)
def test_base_url_with_aws_domain(domain, stage, expected):
    """Ensure base_url() appends stage for default AWS execute-api domains."""
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert base_url(event) == expected


# -------------------------------
# 1.2. Custom domain handling
# -------------------------------


@pytest.mark.parametrize(
    'domain, stage, expected',
    [
        ('sho.rt', 'Dev', 'https://sho.rt'),
        ('example.com', 'Prod', 'https://example.com'),
    ],
)
def test_base_url_with_custom_domain(domain, stage, expected):
    """Ensure base_url() excludes stage for custom user-defined domains."""
    event = {'requestContext': {'domainName': domain, 'stage': stage}}
    assert base_url(event) == expected


# -------------------------------
# 1.3. Local fallback
# -------------------------------


@pytest.mark.parametrize('event', [{}, {'requestContext': {}}, {'requestContext': {'stage': 'Prod'}}])
def test_base_url_local_fallback(event):
    """Ensure base_url() falls back to localhost without a domain."""
    assert base_url(event) == 'http://localhost:3000'


# -------------------------------
# 2. get_short_url()
# -------------------------------


def test_get_short_url():
    event = {'requestContext': {'domainName': 'sho.rt', 'stage': 'Prod'}}
    assert get_short_url('abc-123_', event) == 'https://sho.rt/abc-123_'
    assert get_short_url('abc-123_', {}) == 'http://localhost:3000/abc-123_'


# -------------------------------
# 3. running_locally() behavior
# -------------------------------


@pytest.mark.parametrize(
    'app_env, sam_flag, expected',
    [
        ('local', None, True),
        ('LOCAL', None, True),
        (None, None, True),
        ('dev', None, False),
        ('prod', 'false', False),
        ('dev', 'true', True),
    ],
)
def test_running_locally(monkeypatch, app_env, sam_flag, expected):
    for name, value in ((ENV.App.APP_ENV, app_env), (ENV.App.AWS_SAM_LOCAL, sam_flag)):
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    assert running_locally() is expected


# -------------------------------
# 4. guarantee_500_response() behavior
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """4.1. Faulty handler returns 500 response when not running locally."""
    monkeypatch.setattr('urlshortener.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise DataStoreError('disk full')

    response = faulty_lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['errorCode'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    """4.2. Faulty handler reraises the original exception when running locally."""
    monkeypatch.setattr('urlshortener.utils.helpers.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)


def test_guarantee_500_response_passes_through():
    """4.3. Healthy handler responses are returned untouched."""

    @guarantee_500_response
    def lambda_handler(event, context):
        return {'statusCode': 200, 'body': json.dumps(event)}

    assert lambda_handler({'a': 1}, None) == {'statusCode': 200, 'body': '{"a": 1}'}
