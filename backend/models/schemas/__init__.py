"""Pydantic contracts shared by the catalog, matcher and API layers."""

from models.schemas.base import CamelModel
from models.schemas.career import CareerDefinition

__all__ = [
    "CamelModel",
    "CareerDefinition",
]
