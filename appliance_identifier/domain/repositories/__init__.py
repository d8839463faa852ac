"""
Repositories Package

Contracts for data access. Implementations live in the
infrastructure layer.
"""

from .appliance_repository import IApplianceRepository
from .energy_profile_repository import IEnergyProfileRepository

__all__ = ["IApplianceRepository", "IEnergyProfileRepository"]
