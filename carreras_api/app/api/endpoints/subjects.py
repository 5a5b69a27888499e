"""
Subject endpoints.

Subjects are created under an existing career and can be listed
globally or per career.  Updates cannot change a subject's ``id`` or
owning career ``cod``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from carreras_api.app.api.dependencies import get_subject_service
from carreras_api.app.schemas.subject import SubjectCreate, SubjectRead
from carreras_api.app.services import SubjectService

router = APIRouter()


@router.post("/asignaturas", response_model=SubjectRead, status_code=status.HTTP_201_CREATED)
async def create_subject(
    subject_in: SubjectCreate,
    service: SubjectService = Depends(get_subject_service),
) -> Dict[str, Any]:
    """Create a subject and return it with its generated ``id``."""
    return await service.create_subject(subject_in)


@router.get("/asignaturas", response_model=List[SubjectRead])
async def list_subjects(service: SubjectService = Depends(get_subject_service)) -> List[Dict[str, str]]:
    return await service.list_subjects()


@router.get("/asignaturas/{subject_id}", response_model=SubjectRead)
async def get_subject(subject_id: str, service: SubjectService = Depends(get_subject_service)) -> Dict[str, str]:
    subject = await service.get_subject(subject_id)
    if subject is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asignatura no encontrada.")
    return subject


@router.put("/asignaturas/{subject_id}", response_model=SubjectRead)
async def update_subject(
    subject_id: str,
    fields: Dict[str, Any] = Body(...),
    service: SubjectService = Depends(get_subject_service),
) -> Dict[str, str]:
    """Merge the supplied fields into a subject; ``id`` and ``cod`` are ignored."""
    return await service.update_subject(subject_id, fields)


@router.get("/carreras/{codigo}/asignaturas", response_model=List[SubjectRead])
async def list_career_subjects(
    codigo: str,
    service: SubjectService = Depends(get_subject_service),
) -> List[Dict[str, str]]:
    """Return the subjects of a career.  Unknown careers give an empty list."""
    return await service.list_career_subjects(codigo)
