"""
Domain Layer Package

Core rules of the appliance identifier: value types, the error
taxonomy, the ports implemented by infrastructure and the pure
services that operate on them. No framework or driver imports.
"""

from appliance_identifier.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
