"""URL record DAO construction from configuration

Functions:
    create_dao(backend: str, options: dict, **kwargs) -> UrlRecordBaseDAO
        Build a fresh DAO for the given backend and options.
    url_record_dao() -> UrlRecordBaseDAO
        Return the process-wide DAO built from `load_config()`.

Example:
    >>> dao = create_dao('file', {'path': 'data/urls.json'})
    >>> type(dao).__name__
    'UrlRecordFileDAO'
"""

import functools
import logging

from urlshortener.constants import Backend
from urlshortener.exceptions import BadConfigurationError
from urlshortener.types import BackendOptions
from urlshortener.utils.config import load_config, app_prefix, project_root
from urlshortener.dao.base import UrlRecordBaseDAO


logger = logging.getLogger(__name__)


def create_dao(backend: str, options: BackendOptions | None = None, **kwargs) -> UrlRecordBaseDAO:
    """Build a URL record DAO

    Args:
        backend (str):
            One of 'memory', 'file' or 'redis'.
        options (dict | None):
            Backend options. 'file' requires 'path' (relative paths resolve
            against the project root). 'redis' accepts host, port, db,
            username and password.
        **kwargs:
            Forwarded to the DAO (e.g. shortcode_generator, max_attempts).

    Raises:
        BadConfigurationError:
            If the backend is unknown or required options are missing.
        DataStoreError:
            If the backend's storage can't be reached or loaded.
    """
    options = dict(options or {})

    match backend:
        case Backend.MEMORY:
            from urlshortener.dao.memory import UrlRecordMemoryDAO

            return UrlRecordMemoryDAO(**kwargs)

        case Backend.FILE:
            from urlshortener.dao.file import UrlRecordFileDAO

            if 'path' not in options:
                raise BadConfigurationError("The 'file' store backend requires a 'path' option.")
            path = project_root() / options['path']
            return UrlRecordFileDAO(path=path, **kwargs)

        case Backend.REDIS:
            from urlshortener.dao.redis import UrlRecordRedisDAO

            return UrlRecordRedisDAO.from_options(options, prefix=app_prefix(), **kwargs)

        case _:
            raise BadConfigurationError(f"Unknown store backend '{backend}'.")


@functools.cache
def url_record_dao() -> UrlRecordBaseDAO:
    """Return the process-wide URL record DAO

    Built once from the application configuration on first use and shared
    by every request handler for the lifetime of the process.
    """
    config = load_config()
    backend, options = next(iter(config.items()))
    logger.info('Initializing URL record store.', extra={'backend': backend})
    return create_dao(backend, options)
