"""Utility functions for application configuration management.

Configuration is read from environment variables and a JSON document
describing the available URL record store backends. Each environment
(`APP_ENV`) has its own document, by default `config/<app env>.json`
under the project root; `APP_CONFIG_PATH` points at a document explicitly.

The configuration JSON follows this structure:

    {
        "active_backend": "file",
        "backends": {
            "memory": {},
            "file": {"path": "data/urls.json"},
            "redis": {"host": "localhost", "port": 6379, "db": 0}
        }
    }

`STORE_BACKEND` overrides `active_backend` without editing the document.
Without any document the in-memory backend is used.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    config_path() -> Path
        Return the path of the configuration document for this environment.

    load_config() -> dict
        Load the active backend's options as `{backend: options}`.

Example:
    >>> from urlshortener.utils.config import load_config
    >>> load_config()
    {'file': {'path': 'data/urls.json'}}
"""

import os
import json
import logging
from pathlib import Path

from urlshortener.constants import ENV, Backend
from urlshortener.exceptions import BadConfigurationError
from urlshortener.types import AppConfig


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Reads PROJECT_ROOT and falls back to the current working directory.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd()))


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'urlshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'urlshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def config_path() -> Path:
    """Return the configuration document path for the current environment"""
    explicit = os.environ.get(ENV.App.CONFIG_PATH)
    if explicit:
        return Path(explicit)
    return project_root() / 'config' / f'{app_env()}.json'


def load_config() -> AppConfig:
    """Load the URL record store configuration

    Returns:
        dict: `{backend: options}` for the active backend, e.g.
              `{'redis': {'host': 'localhost', 'port': 6379}}`.

    Raises:
        BadConfigurationError:
            If the document isn't a valid JSON object, or the active
            backend is unknown or has no options section.
    """
    path = config_path()
    override = os.environ.get(ENV.App.STORE_BACKEND)

    if path.is_file():
        logger.debug('Loading configuration document.', extra={'configPath': str(path)})
        try:
            document = json.loads(path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise BadConfigurationError(f'Configuration document {path} is not valid JSON.') from e
        if not isinstance(document, dict) or not isinstance(document.get('backends', {}), dict):
            raise BadConfigurationError(f"Configuration document {path} must be a JSON object with a 'backends' object.")
    else:
        logger.debug('No configuration document found. Using defaults.', extra={'configPath': str(path)})
        document = {'active_backend': Backend.MEMORY, 'backends': {Backend.MEMORY: {}}}

    backend = override or document.get('active_backend') or Backend.MEMORY
    backend = backend.lower() if isinstance(backend, str) else backend
    if backend not in set(Backend):
        raise BadConfigurationError(f"Unknown store backend '{backend}' (expected one of: {', '.join(Backend)}).")

    backends = document.get('backends', {})
    if backend not in backends and backend != Backend.MEMORY:
        raise BadConfigurationError(f"Missing options for store backend '{backend}' in {path}.")

    options = backends.get(backend) or {}
    if not isinstance(options, dict):
        raise BadConfigurationError(f"Options for store backend '{backend}' in {path} must be a JSON object.")
    logger.debug('Loaded configuration.', extra={'backend': backend})
    return {backend: options}
