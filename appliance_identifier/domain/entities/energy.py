"""
Domain Entities - Energy

Reference energy profiles for known appliance types and the unit
constants used to turn wattage into consumption and cost.
"""

from dataclasses import dataclass

COST_PER_KILOWATT_HOUR = 0.16
"""Electricity price in currency units per kWh."""

ASSUMED_HOURS_PER_DAY = 24
DAYS_PER_MONTH = 30


def continuous_daily_kilowatt_hours(wattage_watts: float) -> float:
    """Energy per day for an appliance drawing ``wattage_watts`` around the clock."""
    return wattage_watts * ASSUMED_HOURS_PER_DAY / 1000


@dataclass(frozen=True)
class EnergyProfile:
    """Typical consumption data for one appliance type."""

    category: str
    typical_wattage_watts: float
    usage_hours_per_day: float

    @property
    def daily_kilowatt_hours(self) -> float:
        return self.typical_wattage_watts * self.usage_hours_per_day / 1000
