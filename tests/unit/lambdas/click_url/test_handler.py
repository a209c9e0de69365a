import json
from typing import cast

import pytest
from pytest import MonkeyPatch

from urlshortener.types import LambdaEvent, LambdaContext
from urlshortener.lambdas.click_url import app
from urlshortener.dao.memory import UrlRecordMemoryDAO


def make_event(body: str | None) -> LambdaEvent:
    return cast(LambdaEvent, {'resource': '/click', 'httpMethod': 'POST', 'path': '/click', 'body': body})


class TestClickUrlHandler:

    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch: MonkeyPatch, context: LambdaContext, memory_dao: UrlRecordMemoryDAO) -> None:
        self.record = memory_dao.create('https://example.com/blog')
        monkeypatch.setattr(app, 'url_record_dao', lambda: memory_dao)

        self.context = context
        self.dao = memory_dao

    def test_lambda_handler(self) -> None:
        event = make_event(json.dumps({'shortCode': self.record.short_code}))

        first = json.loads(app.lambda_handler(event, self.context)['body'])
        response = app.lambda_handler(event, self.context)
        second = json.loads(response['body'])

        assert response['statusCode'] == 200
        assert first['clicks'] == 1
        assert second['clicks'] == 2
        assert second['original_url'] == 'https://example.com/blog'
        assert self.dao.lookup(self.record.short_code).clicks == 2

    def test_lambda_handler_with_unknown_shortcode(self) -> None:
        response = app.lambda_handler(make_event(json.dumps({'shortCode': 'missing'})), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 404
        assert body['errorCode'] == 'SHORT_URL_NOT_FOUND'
        assert body['message'] == "Not Found (short code 'missing' doesn't exist)"
        assert self.dao.lookup('missing') is None

    @pytest.mark.parametrize('payload', [{}, {'shortCode': ''}, {'shortCode': 123}])
    def test_lambda_handler_with_missing_shortcode(self, payload: dict) -> None:
        response = app.lambda_handler(make_event(json.dumps(payload)), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['errorCode'] == 'MISSING_SHORTCODE'

    def test_lambda_handler_with_invalid_json_body(self) -> None:
        response = app.lambda_handler(make_event('{"shortCode":'), self.context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['errorCode'] == 'INVALID_JSON_BODY'
