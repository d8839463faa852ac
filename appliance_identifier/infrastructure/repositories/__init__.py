"""
Repositories Package - Infrastructure Layer

Concrete implementations of the domain repository interfaces.
"""

from .memory_appliance_repository import InMemoryApplianceRepository
from .mongo_appliance_repository import MongoApplianceRepository
from .static_energy_profile_repository import (
    ENERGY_PROFILES,
    StaticEnergyProfileRepository,
)

__all__ = [
    "MongoApplianceRepository",
    "InMemoryApplianceRepository",
    "StaticEnergyProfileRepository",
    "ENERGY_PROFILES",
]
