import json
from typing import cast

import pytest
from pytest import MonkeyPatch

from urlshortener.types import LambdaEvent, LambdaContext
from urlshortener.lambdas.delete_url import app
from urlshortener.dao.memory import UrlRecordMemoryDAO


def make_event(body: str | None) -> LambdaEvent:
    return cast(LambdaEvent, {'resource': '/delete', 'httpMethod': 'DELETE', 'path': '/delete', 'body': body})


class TestDeleteUrlHandler:

    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch: MonkeyPatch, context: LambdaContext, memory_dao: UrlRecordMemoryDAO) -> None:
        self.record = memory_dao.create('https://example.com')
        monkeypatch.setattr(app, 'url_record_dao', lambda: memory_dao)

        self.context = context
        self.dao = memory_dao

    def test_lambda_handler(self) -> None:
        event = make_event(json.dumps({'shortCode': self.record.short_code}))
        response = app.lambda_handler(event, self.context)

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'success': True}
        assert self.dao.lookup(self.record.short_code) is None

        # Deleting again reports not found
        again = app.lambda_handler(event, self.context)
        assert again['statusCode'] == 404
        assert json.loads(again['body'])['errorCode'] == 'SHORT_URL_NOT_FOUND'

    def test_lambda_handler_with_missing_shortcode(self) -> None:
        response = app.lambda_handler(make_event(None), self.context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['errorCode'] == 'MISSING_SHORTCODE'
        assert self.dao.lookup(self.record.short_code) == self.record
