import functools
from typing import TypeVar, Any
from collections.abc import Callable

from urlshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_file_storage_error[F](method: F) -> F:
    """Wrap file-backed DAO methods to handle I/O errors

    Args:
        method (Callable[..., Any]):
            DAO method reading or writing the snapshot file, which may raise OSError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on I/O failures.

    Example:
        >>> @handle_file_storage_error
        ... def delete(self, short_code):
        ...     ...
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except OSError as e:
            raise DataStoreError(f"Can't access URL records file at {self.path}.") from e

    return wrapper
