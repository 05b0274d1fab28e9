"""Import externally produced JSON files into the configured blob store.

Usage:
    python -m techdispatch.tools.import_files
    python -m techdispatch.tools.import_files --data-dir exports
    python -m techdispatch.tools.import_files --drop  # also remove keys with no source file
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from techdispatch.adapters.persistence.database import create_schema, engine
from techdispatch.adapters.serialization.codec import (
    decode_assigned_tasks,
    decode_predictions,
    decode_tasks,
)
from techdispatch.application.ports.blob_store import BlobStore
from techdispatch.config import settings
from techdispatch.domain.exceptions import CorruptStoreError, StorageIOError
from techdispatch.infrastructure.api.dependencies import build_blob_store

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def _sources() -> list[tuple[str, Callable[[str, bytes], list]]]:
    return [
        (settings.assigned_tasks_key, decode_assigned_tasks),
        (settings.predictions_key, decode_predictions),
        (settings.tasks_key, decode_tasks),
    ]


async def import_files(store: BlobStore, data_dir: Path, drop: bool = False) -> dict[str, int]:
    """Validate and copy each known JSON file from *data_dir* into *store*.

    Every source file is read and decoded before its key is touched, so the
    store may be the very directory being imported. Valid files overwrite
    their key; files that fail to decode are reported and leave the key as
    it was. With *drop*, only keys that have no source file are removed.

    Returns the number of records imported per key.
    """
    counts: dict[str, int] = {}
    for key, decode in _sources():
        path = data_dir / key
        if not path.is_file():
            if drop:
                await store.delete(key)
                logger.info("Dropped %s: no source file in %s", key, data_dir)
            else:
                logger.warning("Skipping %s: %s not found", key, path)
            continue

        raw = path.read_bytes()
        try:
            records = decode(key, raw)
        except CorruptStoreError as e:
            logger.error("Skipping %s: %s", key, e.reason)
            continue

        await store.write_all(key, raw)
        counts[key] = len(records)
        logger.info("Imported %d records into %s", len(records), key)
    return counts


async def _main(data_dir: Path, drop: bool) -> int:
    expected = {key for key, _ in _sources() if (data_dir / key).is_file()}
    if settings.storage_backend == "sql":
        await create_schema()
    store = build_blob_store()
    try:
        counts = await import_files(store, data_dir, drop=drop)
    except StorageIOError as e:
        logger.error("Import aborted: %s", e)
        return 1
    finally:
        await engine.dispose()

    failed = expected - counts.keys()
    if failed:
        logger.error("Failed to import: %s", ", ".join(sorted(failed)))
        return 1
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--data-dir", type=Path, default=Path(settings.data_dir))
    parser.add_argument("--drop", action="store_true", help="also remove keys that have no source file")
    args = parser.parse_args()

    if not args.data_dir.is_dir():
        logger.error("Data directory not found: %s", args.data_dir)
        sys.exit(2)

    sys.exit(asyncio.run(_main(args.data_dir, args.drop)))


if __name__ == "__main__":
    main()
