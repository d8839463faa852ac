"""
Energy Profile Repository Interface

Read-only reference data mapping appliance names to typical
consumption. Lookups are case-insensitive and fall back to substring
matching; the two estimate helpers never fail.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from appliance_identifier.domain.entities.energy import EnergyProfile

DEFAULT_WATTAGE_WATTS = 100.0
UNKNOWN_CATEGORY = "Unknown"


class IEnergyProfileRepository(ABC):
    """Interface for reference energy data."""

    @abstractmethod
    def lookup(self, appliance_name: str) -> Optional[EnergyProfile]:
        """
        Find the profile for an appliance name.

        Args:
            appliance_name: Human-readable appliance name, any case

        Returns:
            The matching profile, or None when nothing matches
        """
        pass

    @abstractmethod
    def profiles(self) -> List[Tuple[str, EnergyProfile]]:
        """Return every (name, profile) pair in lookup order."""
        pass

    def estimate_wattage(self, appliance_name: str) -> float:
        """Typical wattage, or ``DEFAULT_WATTAGE_WATTS`` for unknown names."""
        profile = self.lookup(appliance_name)
        if profile is None:
            return DEFAULT_WATTAGE_WATTS
        return profile.typical_wattage_watts

    def category_of(self, appliance_name: str) -> str:
        """Category, or ``UNKNOWN_CATEGORY`` for unknown names."""
        profile = self.lookup(appliance_name)
        if profile is None:
            return UNKNOWN_CATEGORY
        return profile.category
