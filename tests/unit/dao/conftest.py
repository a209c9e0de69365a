import pytest

from urlshortener.dao.memory import UrlRecordMemoryDAO
from urlshortener.dao.file import UrlRecordFileDAO


@pytest.fixture(params=['memory', 'file'])
def dao(request, tmp_path):
    """Fresh in-process URL record store, for each backend."""
    if request.param == 'memory':
        return UrlRecordMemoryDAO()
    return UrlRecordFileDAO(path=tmp_path / 'urls.json')
