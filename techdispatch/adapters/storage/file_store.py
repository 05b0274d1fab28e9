"""File-backed blob store — one JSON document per file, replaced atomically."""

from __future__ import annotations

import asyncio
import contextlib
import os
import tempfile
from pathlib import Path

from techdispatch.adapters.storage.guard import guarded
from techdispatch.application.ports.blob_store import BlobStore
from techdispatch.domain.exceptions import NotFoundError


def _write_atomic(path: Path, data: bytes) -> None:
    """Write to a temp file beside *path*, fsync, then rename over it.

    os.replace is atomic on POSIX and Windows, so a concurrent reader sees
    either the old file or the new one.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


def _read(path: Path, key: str) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        raise NotFoundError(key) from None


class FileBlobStore(BlobStore):
    def __init__(self, base_dir: Path | str, timeout: float = 5.0):
        self._base = Path(base_dir)
        self._timeout = timeout

    @property
    def base_dir(self) -> Path:
        return self._base

    def _path(self, key: str) -> Path:
        if not key or Path(key).name != key or key in (".", ".."):
            raise ValueError(f"Invalid store key: {key!r}")
        return self._base / key

    async def read_all(self, key: str) -> bytes:
        path = self._path(key)
        return await guarded(key, "read", asyncio.to_thread(_read, path, key), self._timeout)

    async def write_all(self, key: str, data: bytes) -> None:
        path = self._path(key)
        await guarded(key, "write", asyncio.to_thread(_write_atomic, path, data), self._timeout)

    async def exists(self, key: str) -> bool:
        path = self._path(key)
        return await guarded(key, "stat", asyncio.to_thread(path.is_file), self._timeout)

    async def delete(self, key: str) -> None:
        path = self._path(key)
        await guarded(
            key, "delete", asyncio.to_thread(path.unlink, missing_ok=True), self._timeout
        )
