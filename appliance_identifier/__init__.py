"""Appliance identifier: photo to appliance, wattage and monthly cost."""

__version__ = "1.0.0"
