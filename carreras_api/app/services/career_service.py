"""
Service layer for careers.

Careers are stored as hashes under ``carrera:<codigo>`` and enumerated
through the ``<prefix>:carreras`` index set.  A career has no schema
beyond its ``codigo``: whatever fields the caller sends are stored.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from carreras_api.app.core.errors import NotFoundError, ValidationError
from carreras_api.app.core.store import KVRepository

logger = logging.getLogger(__name__)


def career_key(codigo: str) -> str:
    return f"carrera:{codigo}"


class CareerService:
    """Create, list, fetch and update careers."""

    def __init__(self, repository: KVRepository):
        self.repository = repository

    @property
    def index(self) -> str:
        return self.repository.index("carreras")

    async def create_careers(self, items: Any) -> int:
        """Store every well-formed career in ``items`` in one batch.

        ``items`` must be a list; anything else is rejected before the
        store is touched.  Entries that are not mappings or that lack a
        ``codigo`` are skipped without error.  Writing an existing code
        again overwrites the fields it mentions.  Returns the number of
        careers written.
        """
        if not isinstance(items, list):
            raise ValidationError("El cuerpo de la petición debe ser un array de carreras.")

        entries = []
        for position, item in enumerate(items):
            if not isinstance(item, Mapping) or not item.get("codigo"):
                logger.debug("Skipping malformed career entry at position %d", position)
                continue
            entries.append((career_key(str(item["codigo"])), item, (self.index,)))

        written = await self.repository.add_many(entries)
        logger.info("Created %d career(s), skipped %d", written, len(items) - written)
        return written

    async def list_careers(self) -> List[Dict[str, str]]:
        return await self.repository.list_all(self.index)

    async def get_career(self, codigo: str) -> Optional[Dict[str, str]]:
        return await self.repository.get(career_key(codigo))

    async def update_career(self, codigo: str, fields: Mapping[str, Any]) -> Dict[str, str]:
        """Merge ``fields`` into an existing career and return it.

        Only the path code is used for the lookup.  A ``codigo`` inside
        ``fields`` is written like any other field.
        """
        key = career_key(codigo)
        if not await self.repository.exists(key):
            raise NotFoundError("Carrera no encontrada.")
        career = await self.repository.update(key, fields)
        logger.info("Updated career %s (%s)", codigo, ", ".join(fields) or "no fields")
        return career
