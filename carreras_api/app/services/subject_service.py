"""
Service layer for subjects.

Subjects are stored as hashes under ``asignatura:<id>`` and are listed
through two index sets: a global one and one per owning career.  A
subject must point at an existing career when it is created; after
that nothing ties the two together (no cascade, no orphan checks).
"""

from __future__ import annotations

import logging
import secrets
import string
from typing import Any, Dict, List, Mapping, Optional

from carreras_api.app.core.errors import NotFoundError, ValidationError
from carreras_api.app.core.store import KVRepository
from carreras_api.app.schemas.subject import SubjectCreate
from carreras_api.app.services.career_service import career_key

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_letters + string.digits + "_-"
ID_SIZE = 10
REQUIRED_FIELDS = ("cod", "asig", "uc")
IMMUTABLE_FIELDS = ("id", "cod")


def generate_id(size: int = ID_SIZE) -> str:
    """Return a random URL-safe token.  Collisions are not checked."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def subject_key(subject_id: str) -> str:
    return f"asignatura:{subject_id}"


class SubjectService:
    """Create, list, fetch and update subjects."""

    def __init__(self, repository: KVRepository):
        self.repository = repository

    @property
    def index(self) -> str:
        return self.repository.index("asignaturas")

    def career_index(self, codigo: str) -> str:
        return self.repository.index("carrera", codigo, "asignaturas")

    async def create_subject(self, data: SubjectCreate) -> Dict[str, Any]:
        """Create a subject under an existing career.

        Raises ``ValidationError`` when a required field is absent and
        ``NotFoundError`` when the career does not exist; in both cases
        nothing is written.  The record, its global index entry and its
        per-career index entry are written in one batch.
        """
        missing = [name for name in REQUIRED_FIELDS if getattr(data, name) is None]
        if missing:
            raise ValidationError("Faltan campos requeridos: " + ", ".join(missing) + ".")

        codigo = str(data.cod)
        if not await self.repository.exists(career_key(codigo)):
            raise NotFoundError(f"La carrera con código {codigo} no existe.")

        subject = {
            "id": generate_id(),
            "cod": codigo,
            "asig": data.asig,
            "uc": data.uc,
            "requisitos": data.requisitos or [],
        }
        await self.repository.add(
            subject_key(subject["id"]),
            subject,
            self.index,
            self.career_index(codigo),
        )
        logger.info("Created subject %s for career %s", subject["id"], codigo)
        return subject

    async def list_subjects(self) -> List[Dict[str, str]]:
        return await self.repository.list_all(self.index)

    async def list_career_subjects(self, codigo: str) -> List[Dict[str, str]]:
        """Subjects indexed under ``codigo``.  Unknown careers yield ``[]``."""
        return await self.repository.list_all(self.career_index(codigo))

    async def get_subject(self, subject_id: str) -> Optional[Dict[str, str]]:
        return await self.repository.get(subject_key(subject_id))

    async def update_subject(self, subject_id: str, fields: Mapping[str, Any]) -> Dict[str, str]:
        """Merge ``fields`` into an existing subject and return it.

        ``id`` and ``cod`` are dropped from ``fields``: they cannot change
        after creation.
        """
        key = subject_key(subject_id)
        if not await self.repository.exists(key):
            raise NotFoundError("Asignatura no encontrada.")
        changes = {name: value for name, value in fields.items() if name not in IMMUTABLE_FIELDS}
        subject = await self.repository.update(key, changes)
        logger.info("Updated subject %s (%s)", subject_id, ", ".join(changes) or "no fields")
        return subject
