"""
DTOs Package - Application Layer

Pydantic models describing what crosses the HTTP boundary.
"""

from .appliance_dto import ApplianceDraftDTO, ApplianceResponseDTO, EnergyProfileDTO
from .health_dto import (
    ApplicationInfoDTO,
    ClassifierHealthDTO,
    StorageHealthDTO,
    SystemHealthDTO,
)

__all__ = [
    "ApplianceDraftDTO",
    "ApplianceResponseDTO",
    "EnergyProfileDTO",
    "ApplicationInfoDTO",
    "StorageHealthDTO",
    "ClassifierHealthDTO",
    "SystemHealthDTO",
]
