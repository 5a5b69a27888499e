"""
Service layer abstraction.

Each service encapsulates the rules for one collection and talks to
the store only through ``KVRepository``, so the HTTP handlers never
issue store commands and the store can be faked in tests.
"""

from .career_service import CareerService
from .subject_service import SubjectService

__all__ = ["CareerService", "SubjectService"]
