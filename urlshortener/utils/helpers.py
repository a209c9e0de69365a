"""Helper utilities for request handlers.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    get_short_url() -> str
        Get string representation of short URL for a given shortcode
    running_locally() -> bool
        True when handlers run on a developer machine
    guarantee_500_response(handler) -> Callable
        Decorator: Turn uncaught handler exceptions into a 500 response

Example:
    Typical usage inside a handler:

        >>> from urlshortener.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> base_url({})
        'http://localhost:3000'
"""

import os
import json
import logging
import functools
from typing import Any
from collections.abc import Callable

from urlshortener.constants import ENV, UNKNOWN_INTERNAL_SERVER_ERROR
from urlshortener.utils.config import app_env


logger = logging.getLogger(__name__)


def base_url(event: dict[str, Any]) -> str:
    """Extract public base URL from API Gateway event

    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to the handler

    Returns:
        str: Base URL, e.g.:
             - "https://sho.rt"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # Custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (SAM CLI, tests, etc.)
        return 'http://localhost:3000'


def get_short_url(shortcode: str, event: dict[str, Any]) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        event (dict): API Gateway event object passed to the handler

    Returns:
        str: short url string representation
    """
    return f'{base_url(event).rstrip("/")}/{shortcode}'


def running_locally() -> bool:
    """Check whether handlers run on a developer machine

    True for APP_ENV=local (also the default when APP_ENV is unset, as in
    `app_env()`) and under `sam local`, which sets AWS_SAM_LOCAL=true.
    """
    return app_env() == 'local' or os.environ.get(ENV.App.AWS_SAM_LOCAL) == 'true'


def guarantee_500_response(handler: Callable[..., dict]) -> Callable[..., dict]:
    """Decorator: respond with 500 whenever the handler raises

    Storage and generation faults are not handled by the core. This is the
    single place where they turn into a generic failure for the client.
    When running locally the original exception is re-raised for debugging.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: dict, context: Any, *args, **kwargs) -> dict:
        try:
            return handler(event, context, *args, **kwargs)
        except Exception as e:
            logger.exception(
                'Unhandled exception in request handler. Responding with 500.',
                extra={'handler': handler.__module__, 'errorCode': getattr(e, 'error_code', None)},
            )
            if running_locally():
                raise
            return {
                'statusCode': 500,
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'errorCode': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper
