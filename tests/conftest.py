"""Pytest configuration and shared fixtures."""

import asyncio
import json

import pytest

from techdispatch.application.ports.blob_store import BlobStore
from techdispatch.domain.exceptions import NotFoundError


class InMemoryBlobStore(BlobStore):
    """Dict-backed store. Yields to the event loop on every call so that
    unsynchronized read-modify-write cycles would interleave."""

    def __init__(self, blobs: dict[str, bytes] | None = None):
        self.blobs: dict[str, bytes] = dict(blobs or {})
        self.writes = 0

    async def read_all(self, key):
        await asyncio.sleep(0)
        if key not in self.blobs:
            raise NotFoundError(key)
        return self.blobs[key]

    async def write_all(self, key, data):
        await asyncio.sleep(0)
        self.blobs[key] = data
        self.writes += 1

    async def exists(self, key):
        return key in self.blobs

    async def delete(self, key):
        self.blobs.pop(key, None)


def dump(records: list[dict]) -> bytes:
    return json.dumps(records).encode("utf-8")


@pytest.fixture
def memory_store():
    return InMemoryBlobStore()


@pytest.fixture
def assigned_records():
    return [
        {"Technician ID": "T-1", "Task Priority": 1, "Task Duration": 2.0, "Distance to Task in km": 5},
        {"Technician ID": "T-2", "Task Priority": 3, "Task Duration": 1.5, "Distance to Task in km": 12},
        {"Technician ID": "T-1", "Task Priority": 2, "Task Duration": 0.5, "Distance to Task in km": 40},
        {"Technician ID": "T-3", "Task Priority": 5, "Task Duration": 4.25, "Distance to Task in km": 7},
        {"Technician ID": "T-1", "Task Priority": 4, "Task Duration": 3.0, "Distance to Task in km": 1},
    ]


@pytest.fixture
def prediction_records():
    return [
        {"Technician ID": "A", "Task Priority": 1, "Task Duration": 2.0, "Distance to Task in km": 5, "probability": 0.6},
        {"Technician ID": "B", "Task Priority": 1, "Task Duration": 2.0, "Distance to Task in km": 5, "probability": 0.9},
        {"Technician ID": "X", "Task Priority": 2, "Task Duration": 1.0, "Distance to Task in km": 8, "probability": 0.5},
        {"Technician ID": "Y", "Task Priority": 2, "Task Duration": 1.0, "Distance to Task in km": 8, "probability": 0.5},
    ]


@pytest.fixture
def make_store():
    """Build an InMemoryBlobStore from {key: records-or-raw-bytes}."""

    def _make(docs: dict | None = None) -> InMemoryBlobStore:
        blobs = {
            key: value if isinstance(value, bytes) else dump(value)
            for key, value in (docs or {}).items()
        }
        return InMemoryBlobStore(blobs)

    return _make
