"""
Pydantic models for career data.

A career is a flat mapping of caller-supplied fields identified by its
``codigo``.  Field values come back from the store as strings, so the
read model simply allows any extra field.
"""

from pydantic import BaseModel, ConfigDict, Field


class CareerRead(BaseModel):
    """Schema for reading a career record."""

    codigo: str = Field(..., examples=["ING01"])

    model_config = ConfigDict(extra="allow")


class CareersCreated(BaseModel):
    """Acknowledgement returned by bulk career creation."""

    message: str = Field(..., examples=["Carreras creadas exitosamente."])
