"""
Career endpoints.

Bulk creation accepts a JSON array of career objects; listing returns
every indexed career.  Careers can be fetched and partially updated by
code.  There is no delete.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from carreras_api.app.api.dependencies import get_career_service
from carreras_api.app.schemas.career import CareerRead, CareersCreated
from carreras_api.app.services import CareerService

router = APIRouter()


@router.get("", response_model=List[CareerRead])
async def list_careers(service: CareerService = Depends(get_career_service)) -> List[Dict[str, str]]:
    """Return every career in the career index (possibly empty)."""
    return await service.list_careers()


@router.post("", response_model=CareersCreated, status_code=status.HTTP_201_CREATED)
async def create_careers(
    payload: Any = Body(...),
    service: CareerService = Depends(get_career_service),
) -> CareersCreated:
    """Create or overwrite one or more careers.

    The body must be an array; entries without ``codigo`` are skipped.
    Created records are not echoed back.
    """
    await service.create_careers(payload)
    return CareersCreated(message="Carreras creadas exitosamente.")


@router.get("/{codigo}", response_model=CareerRead)
async def get_career(codigo: str, service: CareerService = Depends(get_career_service)) -> Dict[str, str]:
    career = await service.get_career(codigo)
    if career is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Carrera no encontrada.")
    return career


@router.put("/{codigo}", response_model=CareerRead)
async def update_career(
    codigo: str,
    fields: Dict[str, Any] = Body(...),
    service: CareerService = Depends(get_career_service),
) -> Dict[str, str]:
    """Merge the supplied fields into an existing career."""
    return await service.update_career(codigo, fields)
