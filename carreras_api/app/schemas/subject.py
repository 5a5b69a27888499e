"""
Pydantic models for subject data.

``SubjectCreate`` accepts any JSON value for its fields and leaves them
optional: the only check is for absence, so ``uc = 0`` is a valid
credit count and a numeric ``cod`` can point at a career created with
a numeric ``codigo``.  ``SubjectRead`` reshapes stored hash values:
``uc`` back to an integer when it is one and ``requisitos`` back to a
list.
"""

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SubjectCreate(BaseModel):
    """Schema for creating a subject."""

    cod: Optional[Any] = Field(None, description="Code of the owning career", examples=["ING01"])
    asig: Optional[Any] = Field(None, description="Subject name", examples=["Calculo"])
    uc: Optional[Any] = Field(None, description="Credit count", examples=[4])
    requisitos: Optional[Any] = Field(None, description="Prerequisite subject ids")


class SubjectRead(BaseModel):
    """Schema for reading a subject record.

    Fields merged in through updates are kept as extra attributes.
    """

    id: str
    cod: Any
    asig: Any
    uc: Any
    requisitos: Any = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    @field_validator("uc", mode="before")
    @classmethod
    def parse_uc(cls, v):
        if isinstance(v, str):
            try:
                return int(v)
            except ValueError:
                return v
        return v

    @field_validator("requisitos", mode="before")
    @classmethod
    def parse_requisitos(cls, v):
        if isinstance(v, str):
            try:
                decoded = json.loads(v)
            except ValueError:
                return v
            if isinstance(decoded, list):
                return decoded
        return v
