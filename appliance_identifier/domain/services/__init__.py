"""Pure domain services."""

from .appliance_name import normalize_appliance_label

__all__ = ["normalize_appliance_label"]
