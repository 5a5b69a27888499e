"""
Top‑level API router.

Aggregates the domain routers.  Careers and subjects share the
``/carreras`` prefix for the per-career subject listing, so the
subjects router declares its paths in full and is included without a
prefix.
"""

from fastapi import APIRouter

from .endpoints import careers, subjects, info

router = APIRouter()

router.include_router(careers.router, prefix="/carreras", tags=["carreras"])
router.include_router(subjects.router, tags=["asignaturas"])
router.include_router(info.router, tags=["info"])
