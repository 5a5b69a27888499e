"""
FastAPI dependency providers.

The repository is created once by ``create_app`` and kept on
``app.state``; handlers receive services built around it rather than
reaching for module-level singletons.
"""

from fastapi import Depends, Request

from carreras_api.app.core.store import KVRepository
from carreras_api.app.services import CareerService, SubjectService


def get_repository(request: Request) -> KVRepository:
    return request.app.state.repository


def get_career_service(repository: KVRepository = Depends(get_repository)) -> CareerService:
    return CareerService(repository)


def get_subject_service(repository: KVRepository = Depends(get_repository)) -> SubjectService:
    return SubjectService(repository)
