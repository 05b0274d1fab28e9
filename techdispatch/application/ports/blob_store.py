"""Port interface for whole-document storage (read-all / atomic write-all)."""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    @abstractmethod
    async def read_all(self, key: str) -> bytes:
        """Return the full content stored under *key*.

        Raises:
            NotFoundError: nothing has been written under *key* yet.
            StorageIOError: the read failed for any other reason.
        """
        ...

    @abstractmethod
    async def write_all(self, key: str, data: bytes) -> None:
        """Replace the content under *key*.

        Readers must observe either the previous or the new content, never a
        mix of both.
        """
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove *key*; a missing key is not an error."""
        ...
