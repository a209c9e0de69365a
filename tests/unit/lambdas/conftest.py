from typing import cast

import pytest
from pytest import MonkeyPatch

from urlshortener.types import LambdaContext
from urlshortener.utils import helpers
from urlshortener.dao.memory import UrlRecordMemoryDAO


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'urlshortener-test'})


@pytest.fixture
def memory_dao() -> UrlRecordMemoryDAO:
    return UrlRecordMemoryDAO()


@pytest.fixture
def deployed(monkeypatch: MonkeyPatch) -> None:
    """Pretend the handler runs in a deployed environment (500 instead of re-raise)."""
    monkeypatch.setattr(helpers, 'running_locally', lambda: False)
