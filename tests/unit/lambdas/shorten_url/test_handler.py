import json
from typing import cast
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch
from freezegun import freeze_time

from urlshortener.types import LambdaEvent, LambdaContext
from urlshortener.lambdas.shorten_url import app
from urlshortener.dao.memory import UrlRecordMemoryDAO
from urlshortener.dao.exceptions import ShortCodeGenerationExhaustedError


def make_event(body: str | None) -> LambdaEvent:
    return cast(LambdaEvent, {
        'resource': '/shorten',
        'httpMethod': 'POST',
        'path': '/shorten',
        'body': body,
        'requestContext': {'domainName': 'sho.rt', 'stage': 'test'},
    })


class TestShortenUrlHandler:

    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch: MonkeyPatch, context: LambdaContext, memory_dao: UrlRecordMemoryDAO) -> None:
        memory_dao.shortcode_generator = lambda: 'abc-123_'
        monkeypatch.setattr(app, 'url_record_dao', lambda: memory_dao)

        self.context = context
        self.dao = memory_dao

    @freeze_time('2025-10-15 12:00:00')
    def test_lambda_handler(self) -> None:
        response = app.lambda_handler(make_event(json.dumps({'url': '  example.com/page  '})), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 200
        assert response['headers']['Content-Type'] == 'application/json'
        assert body['original_url'] == 'https://example.com/page'
        assert body['short_code'] == 'abc-123_'
        assert body['short_url'] == 'https://sho.rt/abc-123_'
        assert body['created_at'] == '2025-10-15T12:00:00.000Z'
        assert body['clicks'] == 0
        assert len(body['id']) == 21

        # Assert the record was persisted
        assert self.dao.lookup('abc-123_').original_url == 'https://example.com/page'

    @pytest.mark.parametrize('payload', [{'url': ''}, {'url': '   '}, {}, {'url': None}])
    def test_lambda_handler_with_empty_url(self, payload: dict) -> None:
        response = app.lambda_handler(make_event(json.dumps(payload)), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['errorCode'] == 'EMPTY_INPUT'
        assert body['message'] == "Bad Request ('url' must not be empty)"
        assert self.dao.list_all() == []

    def test_lambda_handler_with_invalid_url(self) -> None:
        response = app.lambda_handler(make_event(json.dumps({'url': 'not a url'})), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['errorCode'] == 'INVALID_URL'
        assert body['message'] == "Bad Request ('not a url' is not a valid URL)"
        assert self.dao.list_all() == []

    @pytest.mark.parametrize('url', [42, 0, False, ['https://example.com'], {'href': 'https://example.com'}])
    def test_lambda_handler_with_non_string_url(self, url) -> None:
        response = app.lambda_handler(make_event(json.dumps({'url': url})), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['errorCode'] == 'INVALID_URL'
        assert body['message'] == "Bad Request ('url' must be a string)"
        assert self.dao.list_all() == []

    @pytest.mark.parametrize('raw_body', ['{not json', '["https://example.com"]'])
    def test_lambda_handler_with_invalid_json_body(self, raw_body: str) -> None:
        response = app.lambda_handler(make_event(raw_body), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['errorCode'] == 'INVALID_JSON_BODY'

    @pytest.mark.usefixtures('deployed')
    def test_lambda_handler_with_exhausted_short_codes(self, monkeypatch: MonkeyPatch) -> None:
        dao = MagicMock()
        dao.create.side_effect = ShortCodeGenerationExhaustedError('Could not generate a unique short code in 5 attempts.')
        monkeypatch.setattr(app, 'url_record_dao', lambda: dao)

        response = app.lambda_handler(make_event(json.dumps({'url': 'https://example.com'})), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 500
        assert body == {'message': 'Internal Server Error', 'errorCode': 'UNKNOWN_INTERNAL_SERVER_ERROR'}
