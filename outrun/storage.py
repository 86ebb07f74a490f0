"""A small bucketed key-value store kept in an SQLite file.

Values are zlib-compressed on the way in and decompressed on the way out.
"""

from __future__ import annotations

import os
import sqlite3
import threading
import zlib
from collections.abc import Iterator
from typing import Any

from outrun.constants import DB_FILE_NAME

__all__ = ["KeyNotFoundError", "compress", "decompress", "Store"]

_SCHEMA = """
CREATE TABLE IF NOT EXISTS entries (
    bucket TEXT NOT NULL,
    key TEXT NOT NULL,
    value BLOB NOT NULL,
    PRIMARY KEY (bucket, key)
)
"""


class KeyNotFoundError(LookupError):
    """Raised when a bucket holds no value under a key."""

    def __init__(self, bucket: str, key: str) -> None:
        super().__init__(f"no value named {key!r} in bucket {bucket!r}")
        self.bucket = bucket
        self.key = key


def compress(data: bytes) -> bytes:
    """Compress bytes with zlib."""
    return zlib.compress(bytes(data))


def decompress(data: bytes) -> bytes:
    """Decompress zlib data; raises ValueError if it is not valid zlib."""
    try:
        return zlib.decompress(bytes(data))
    except zlib.error as exc:
        raise ValueError(f"invalid compressed data: {exc}") from exc


class Store:
    """Buckets of compressed values, safe to share between threads."""

    def __init__(self, path: str | os.PathLike[str] = DB_FILE_NAME) -> None:
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(os.fspath(path), timeout=3, check_same_thread=False)
        with self._lock, self._conn:
            self._conn.execute(_SCHEMA)

    def set(self, bucket: str, key: str, value: bytes) -> None:
        """Store a value, replacing any value already under the key."""
        packed = compress(value)
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT OR REPLACE INTO entries (bucket, key, value) VALUES (?, ?, ?)",
                (bucket, key, packed),
            )

    def get(self, bucket: str, key: str) -> bytes:
        """Return the value under the key; raises KeyNotFoundError if absent."""
        with self._lock:
            row = self._conn.execute(
                "SELECT value FROM entries WHERE bucket = ? AND key = ?", (bucket, key)
            ).fetchone()
        if row is None:
            raise KeyNotFoundError(bucket, key)
        return decompress(row[0])

    def delete(self, bucket: str, key: str) -> None:
        """Remove the key; removing an absent key does nothing."""
        with self._lock, self._conn:
            self._conn.execute(
                "DELETE FROM entries WHERE bucket = ? AND key = ?", (bucket, key)
            )

    def items(self, bucket: str) -> Iterator[tuple[str, bytes]]:
        """Iterate over a snapshot of the bucket's keys and values, sorted by key."""
        with self._lock:
            rows = self._conn.execute(
                "SELECT key, value FROM entries WHERE bucket = ? ORDER BY key", (bucket,)
            ).fetchall()
        return ((key, decompress(value)) for key, value in rows)

    def close(self) -> None:
        """Close the underlying database file."""
        with self._lock:
            self._conn.close()

    def __enter__(self) -> Store:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()