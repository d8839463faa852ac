"""
Static Energy Profile Repository - Infrastructure Layer

Bundled reference table of typical residential appliance consumption.
"""

from typing import Dict, List, Optional, Tuple

from appliance_identifier.domain.entities.energy import EnergyProfile
from appliance_identifier.domain.repositories.energy_profile_repository import (
    IEnergyProfileRepository,
)

# Scan order for substring matching. A key that contains another key
# ("water heater" / "heater") must come before it.
ENERGY_PROFILES: Tuple[Tuple[str, EnergyProfile], ...] = (
    # Kitchen
    ("refrigerator", EnergyProfile("Kitchen", 150, 24)),
    ("microwave", EnergyProfile("Kitchen", 1200, 0.5)),
    ("oven", EnergyProfile("Kitchen", 2400, 1)),
    ("dishwasher", EnergyProfile("Kitchen", 1800, 1)),
    ("toaster", EnergyProfile("Kitchen", 1200, 0.2)),
    ("coffee maker", EnergyProfile("Kitchen", 1000, 0.5)),
    # Laundry
    ("washer", EnergyProfile("Laundry", 500, 1)),
    ("dryer", EnergyProfile("Laundry", 3000, 1)),
    ("washing machine", EnergyProfile("Laundry", 500, 1)),
    # Water Heating
    ("water heater", EnergyProfile("Water Heating", 4500, 3)),
    # Climate
    ("air conditioner", EnergyProfile("Climate", 3500, 8)),
    ("heater", EnergyProfile("Climate", 1500, 6)),
    ("fan", EnergyProfile("Climate", 75, 8)),
    # Electronics
    ("television", EnergyProfile("Electronics", 150, 5)),
    ("computer", EnergyProfile("Electronics", 200, 8)),
    ("monitor", EnergyProfile("Electronics", 50, 8)),
    ("laptop", EnergyProfile("Electronics", 50, 8)),
    # Lighting
    ("lamp", EnergyProfile("Lighting", 60, 5)),
)


class StaticEnergyProfileRepository(IEnergyProfileRepository):
    """Exact, then first-substring-match lookup over ``ENERGY_PROFILES``."""

    def __init__(
        self, profiles: Tuple[Tuple[str, EnergyProfile], ...] = ENERGY_PROFILES
    ) -> None:
        self._ordered = tuple((name.lower(), profile) for name, profile in profiles)
        self._by_name: Dict[str, EnergyProfile] = {}
        for name, profile in self._ordered:
            self._by_name.setdefault(name, profile)

    def lookup(self, appliance_name: str) -> Optional[EnergyProfile]:
        query = appliance_name.lower()
        if not query:
            return None

        exact = self._by_name.get(query)
        if exact is not None:
            return exact

        for name, profile in self._ordered:
            if name in query or query in name:
                return profile
        return None

    def profiles(self) -> List[Tuple[str, EnergyProfile]]:
        return list(self._ordered)
