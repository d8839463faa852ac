"""
Use Cases Package - Application Layer

Use cases orchestrate the domain ports on behalf of the presentation
layer.
"""

from .appliance_use_cases import (
    ClassifyAndSaveApplianceUseCase,
    ClassifyApplianceUseCase,
    DeleteApplianceUseCase,
    GetApplianceImageUseCase,
    GetAppliancesUseCase,
    GetReferenceProfilesUseCase,
    SaveApplianceUseCase,
)
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase

__all__ = [
    "ClassifyApplianceUseCase",
    "ClassifyAndSaveApplianceUseCase",
    "GetAppliancesUseCase",
    "SaveApplianceUseCase",
    "DeleteApplianceUseCase",
    "GetApplianceImageUseCase",
    "GetReferenceProfilesUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
