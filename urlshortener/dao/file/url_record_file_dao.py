"""File-backed Data Access Object (DAO) for URL records

This module extends the in-memory store with a JSON snapshot file. The file
is read once at construction and fully rewritten on every mutation.

Snapshot format:

    {
        "urls": [
            {
                "id": "V1StGXR8_Z5jdHi6B-myT",
                "original_url": "https://example.com/page",
                "short_code": "abc-123_",
                "created_at": "2025-10-15T12:00:00.000Z",
                "clicks": 0
            }
        ]
    }

Responsibilities:
    - Load previously committed records on startup;
    - Commit every mutation to disk before reporting success;
    - Replace the file atomically (write temp file, fsync, rename, fsync the
      directory) so a crash never leaves a truncated or lost snapshot;
    - Keep memory and disk consistent when a write fails.

NOTE:
    The lock is process-local. The snapshot file must not be shared by
    multiple processes: concurrent writers would overwrite each other.

Classes:
    UrlRecordFileDAO:
        DAO persisting UrlRecordModel instances to a JSON file.

Example:
    >>> dao = UrlRecordFileDAO(path='data/urls.json')
    >>> record = dao.create('https://example.com/page')
    >>> UrlRecordFileDAO(path='data/urls.json').lookup(record.short_code) == record
    True
"""

import os
import json
import stat
import logging
import tempfile
from pathlib import Path
from contextlib import contextmanager
from collections.abc import Iterator

from urlshortener.models import UrlRecordModel
from urlshortener.dao.memory import UrlRecordMemoryDAO
from urlshortener.dao.file.helpers import handle_file_storage_error
from urlshortener.dao.exceptions import DataStoreError


logger = logging.getLogger(__name__)

# Read once: os.umask() can only be queried by setting it
_UMASK = os.umask(0)
os.umask(_UMASK)


class UrlRecordFileDAO(UrlRecordMemoryDAO):
    """JSON snapshot file backed URL record store

    Attributes:
        path (Path):
            Location of the JSON snapshot file. Parent directories are created on first write.
    """

    def __init__(self, path: str | os.PathLike, **kwargs):
        """Initialize the store from the snapshot file (if it exists)

        Args:
            path (str | os.PathLike):
                Location of the JSON snapshot file.
            **kwargs:
                Forwarded to UrlRecordBaseDAO (shortcode_generator, max_attempts).

        Raises:
            DataStoreError:
                If the file can't be read or doesn't hold a valid snapshot.
        """
        self.path = Path(path)
        super().__init__(records=self._load(), **kwargs)

    @contextmanager
    def _transaction(self) -> Iterator[dict[str, UrlRecordModel]]:
        """Yield a copy of the table and commit it to disk if it changed

        The in-memory table is swapped only after the snapshot was written,
        so a failed write leaves the last committed state in place.
        """
        with self._lock:
            records = dict(self._records)
            yield records
            if records != self._records:
                self._dump(records.values())
                self._records = records

    insert = handle_file_storage_error(UrlRecordMemoryDAO.insert)
    increment_clicks = handle_file_storage_error(UrlRecordMemoryDAO.increment_clicks)
    delete = handle_file_storage_error(UrlRecordMemoryDAO.delete)

    @handle_file_storage_error
    def _load(self) -> list[UrlRecordModel]:
        if not self.path.exists():
            logger.debug('No URL records file found. Starting with an empty store.', extra={'path': str(self.path)})
            return []

        try:
            document = json.loads(self.path.read_text(encoding='utf-8'))
            records = [UrlRecordModel.from_dict(item) for item in document['urls']]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise DataStoreError(f'URL records file at {self.path} is corrupt.') from e

        logger.debug('Loaded URL records file.', extra={'path': str(self.path), 'records': len(records)})
        return records

    def _dump(self, records) -> None:
        """Atomically replace the snapshot file with the given records

        The new snapshot keeps the permissions of the file it replaces (new
        files get the usual umask-derived mode). The directory is fsynced
        after the rename so a committed write survives a crash.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        document = {'urls': [record.to_dict() for record in records]}

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(document, tmp, indent=2)
                tmp.flush()
                os.fchmod(tmp.fileno(), self._snapshot_mode())
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            # Never leave partial temp files behind
            Path(tmp_name).unlink(missing_ok=True)
            raise

        self._fsync_directory()

    def _snapshot_mode(self) -> int:
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return 0o666 & ~_UMASK

    def _fsync_directory(self) -> None:
        dir_fd = os.open(self.path.parent, os.O_RDONLY | getattr(os, 'O_DIRECTORY', 0))
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
