"""SQL-backed blob store — one row per key in the ``blobs`` table."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from techdispatch.adapters.persistence.models import BlobModel
from techdispatch.adapters.storage.guard import guarded
from techdispatch.application.ports.blob_store import BlobStore
from techdispatch.domain.exceptions import NotFoundError


class SqlBlobStore(BlobStore):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession], timeout: float = 5.0):
        self._sessions = session_factory
        self._timeout = timeout

    async def _get(self, key: str) -> str | None:
        async with self._sessions() as s:
            result = await s.execute(select(BlobModel.content).where(BlobModel.key == key))
            return result.scalar_one_or_none()

    async def _put(self, key: str, content: str) -> None:
        # One transaction: readers see the old row until commit
        async with self._sessions() as s, s.begin():
            await s.merge(BlobModel(key=key, content=content))

    async def _delete(self, key: str) -> None:
        async with self._sessions() as s, s.begin():
            await s.execute(delete(BlobModel).where(BlobModel.key == key))

    async def read_all(self, key: str) -> bytes:
        content = await guarded(key, "read", self._get(key), self._timeout)
        if content is None:
            raise NotFoundError(key)
        return content.encode("utf-8")

    async def write_all(self, key: str, data: bytes) -> None:
        await guarded(key, "write", self._put(key, data.decode("utf-8")), self._timeout)

    async def exists(self, key: str) -> bool:
        return await guarded(key, "read", self._get(key), self._timeout) is not None

    async def delete(self, key: str) -> None:
        await guarded(key, "delete", self._delete(key), self._timeout)
