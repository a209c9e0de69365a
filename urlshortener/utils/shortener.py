"""Shortcode generation utility

This module provides helpers for generating short, unpredictable identifiers
drawn from a URL-safe alphabet using a cryptographically strong random source.

Functions:
    generate_shortcode(length=8):
        Generate a random short code suitable for use as a URL slug.
    generate_record_id():
        Generate a random record identifier.

Example:
    >>> from urlshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'k9xZ2a-1'
"""

import secrets

from urlshortener.constants import Shortcode


def generate_shortcode(length: int = Shortcode.LENGTH) -> str:
    """Generate a random URL-safe short code.

    Characters are drawn with `secrets.choice` from [A-Za-z0-9_-] (64 symbols),
    so an 8-character code carries 48 bits of entropy.

    Args:
        length (int, optional):
            Number of characters in the resulting code. Defaults to 8.

    Returns:
        str: A random short code of exactly `length` characters.

    Raises:
        ValueError: If `length` is not a positive integer.

    NOTE:
        The generator does not know about stored records. Uniqueness is
        enforced by the URL record DAO at insertion time.
    """
    if length < 1:
        raise ValueError(f'Short code length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(Shortcode.ALPHABET) for _ in range(length))


def generate_record_id() -> str:
    """Generate a random record identifier (21 URL-safe characters)."""
    return generate_shortcode(length=Shortcode.RECORD_ID_LENGTH)
