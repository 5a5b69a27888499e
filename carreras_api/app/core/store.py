"""
Key-value store integration.

Records live in hashes (one key per record) and are enumerated through
sets of key names ("indexes"), because the store has no range scans.
``KVRepository`` wraps that convention behind a small interface so the
services never issue store commands themselves.  It works with any
client exposing the async Upstash Redis command surface: ``smembers``,
``hset``, ``hgetall``, ``exists``, ``sadd``, ``ping`` and
``pipeline()`` / ``multi()`` batches finished with ``exec()``.

Write batches go through ``multi()`` so the record and its index
entries are applied together in a single REST round trip.  Read
batches use a plain ``pipeline()``.  Nothing is retried; every client
failure is logged and re-raised as ``StoreError``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from upstash_redis.asyncio import Redis

from .config import Settings
from .errors import StoreError

logger = logging.getLogger(__name__)

READ_ERROR = "Error interno del servidor al obtener datos."
WRITE_ERROR = "Error interno del servidor al guardar datos."

# (key, record, indexes) triples accepted by ``KVRepository.add_many``.
Entry = Tuple[str, Mapping[str, Any], Sequence[str]]


def create_kv_client(settings: Settings) -> Redis:
    """Build the Upstash REST client from validated settings.

    ``rest_retries=0`` keeps the client from retrying on its own; a
    failed call surfaces straight away as a store error.
    """
    settings.validate()
    return Redis(
        url=settings.kv_rest_api_url,
        token=settings.kv_rest_api_token,
        rest_retries=0,
    )


def encode_value(value: Any) -> str:
    """Encode a field value for storage in a hash.

    Strings are stored as-is; anything else is stored as JSON text so
    lists survive the round trip (``[]`` -> ``"[]"``).
    """
    if isinstance(value, str):
        return value
    return json.dumps(value)


def encode_record(record: Mapping[str, Any]) -> Dict[str, str]:
    return {str(field): encode_value(value) for field, value in record.items()}


def _as_mapping(result: Any) -> Dict[str, str]:
    # HGETALL may come back as a flat [field, value, ...] list inside a
    # pipeline depending on the client version.
    if not result:
        return {}
    if isinstance(result, dict):
        return dict(result)
    return dict(zip(result[::2], result[1::2]))


class KVRepository:
    """Index-set + hash-record repository over a key-value client."""

    def __init__(self, client: Any, index_prefix: str = "idx"):
        self.client = client
        self.index_prefix = index_prefix

    def index(self, *parts: str) -> str:
        """Return the name of an index set, e.g. ``idx:carreras``."""
        return ":".join((self.index_prefix,) + parts)

    async def add(self, key: str, record: Mapping[str, Any], *indexes: str) -> None:
        """Write one record and add its key to ``indexes`` in one batch."""
        await self.add_many([(key, record, indexes)])

    async def add_many(self, entries: Iterable[Entry]) -> int:
        """Write many records and their index entries in one batch.

        Returns the number of records written.  No request is issued
        when ``entries`` is empty.
        """
        entries = list(entries)
        if not entries:
            return 0
        try:
            tx = self.client.multi()
            for key, record, indexes in entries:
                tx.hset(key, values=encode_record(record))
                for index in indexes:
                    tx.sadd(index, key)
            await tx.exec()
        except Exception as exc:
            logger.exception("Error writing %d record(s) to the store", len(entries))
            raise StoreError(WRITE_ERROR) from exc
        return len(entries)

    async def list_all(self, index: str) -> List[Dict[str, str]]:
        """Return every record whose key is a member of ``index``.

        Uses at most two round trips: one to enumerate the index and one
        pipelined ``HGETALL`` for all members.  Members whose hash no
        longer exists are left out.  Order follows the set enumeration
        and carries no meaning.
        """
        try:
            keys = await self.client.smembers(index)
            keys = [key for key in keys or [] if key]
            if not keys:
                return []
            pipeline = self.client.pipeline()
            for key in keys:
                pipeline.hgetall(key)
            results = await pipeline.exec()
        except Exception as exc:
            logger.exception("Error fetching from index %s", index)
            raise StoreError(READ_ERROR) from exc
        records = [_as_mapping(result) for result in results]
        return [record for record in records if record]

    async def get(self, key: str) -> Optional[Dict[str, str]]:
        """Return the record stored under ``key`` or ``None``."""
        try:
            result = await self.client.hgetall(key)
        except Exception as exc:
            logger.exception("Error reading %s", key)
            raise StoreError(READ_ERROR) from exc
        return _as_mapping(result) or None

    async def exists(self, key: str) -> bool:
        try:
            return bool(await self.client.exists(key))
        except Exception as exc:
            logger.exception("Error checking %s", key)
            raise StoreError(READ_ERROR) from exc

    async def update(self, key: str, partial: Mapping[str, Any]) -> Dict[str, str]:
        """Merge ``partial`` into the hash at ``key`` and return the result.

        Fields not mentioned in ``partial`` are left untouched.  An empty
        ``partial`` writes nothing.  The caller is responsible for
        checking that the key exists first.
        """
        try:
            if partial:
                await self.client.hset(key, values=encode_record(partial))
            result = await self.client.hgetall(key)
        except Exception as exc:
            logger.exception("Error updating %s", key)
            raise StoreError(WRITE_ERROR) from exc
        return _as_mapping(result)

    async def ping(self) -> None:
        try:
            await self.client.ping()
        except Exception as exc:
            logger.exception("Store ping failed")
            raise StoreError(READ_ERROR) from exc

    async def close(self) -> None:
        close = getattr(self.client, "close", None)
        if close is not None:
            await close()
