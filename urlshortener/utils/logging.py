"""JSON logging for request handlers and stores

Call `initialize_logging()` from a handler package's `__init__.py` before
anything logs. Each record becomes one JSON line on stdout:

{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "urlshortener.lambdas.redirect_url.app",
    "message": "Redirecting client to target URL. Responding with 302.",
    "service": "urlshortener",
    "env": "dev",
    "shortcode": "abc-123_",
    "clicks": 3,
    "event": "REDIRECT_SUCCESS"
}

Context such as `shortcode`, `clicks`, `backend` or `errorCode` is passed
with `extra={...}` and copied into the line as is.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from urlshortener.constants import ENV
from urlshortener.utils.config import app_env, app_name


# Attributes every LogRecord carries, plus the ones Formatter.format() adds
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects

    Args:
        service (str | None): Added to every line as `service` when set.
        environment (str | None): Added to every line as `env` when set.
    """

    def __init__(self, service: str | None = None, environment: str | None = None):
        super().__init__()
        self.service = service
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        line = {
            'timestamp': created.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if self.service:
            line['service'] = self.service
        if self.environment:
            line['env'] = self.environment

        line.update((key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS)

        if record.exc_info:
            line['exception'] = self.formatException(record.exc_info)

        # Paths, datetimes and the like are logged by their str()
        return json.dumps(line, default=str)


def initialize_logging() -> None:
    """Send JSON lines to stdout at LOG_LEVEL (default INFO)"""
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                    'service': app_name() or 'urlshortener',
                    'environment': app_env(),
                },
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                },
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
