"""URL normalization and validation

Functions:
    normalize_url(raw_url: str) -> str
        Trim whitespace and prepend 'https://' when no http(s) scheme is present.
    validate_url(url: str) -> str
        Ensure a URL is a well-formed absolute http(s) URL with a host.

Example:
    >>> normalize_url('  example.com/page ')
    'https://example.com/page'
    >>> validate_url('https://not a url')
    Traceback (most recent call last):
        ...
    urlshortener.exceptions.InvalidUrlError: 'https://not a url' is not a valid URL.
"""

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from urlshortener.exceptions import EmptyInputError, InvalidUrlError


_URL_ADAPTER = TypeAdapter(AnyHttpUrl)


def normalize_url(raw_url: str) -> str:
    """Trim the raw URL and default its scheme to https

    Raises:
        EmptyInputError: If nothing is left after trimming whitespace.
    """
    url = raw_url.strip()
    if not url:
        raise EmptyInputError('URL must not be empty.')

    if not url.startswith(('http://', 'https://')):
        url = f'https://{url}'
    return url


def validate_url(url: str) -> str:
    """Validate an absolute http(s) URL and return it unchanged

    Parsing follows the WHATWG URL rules, so hosts containing spaces or other
    forbidden characters are rejected.

    Raises:
        InvalidUrlError: If the URL can't be parsed or has no host.
    """
    try:
        _URL_ADAPTER.validate_python(url)
    except ValidationError as e:
        raise InvalidUrlError(f'{url!r} is not a valid URL.') from e
    return url
