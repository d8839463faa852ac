"""
Controllers Package - Presentation Layer

FastAPI routers. Controllers decode inputs, call use cases and map
domain errors to HTTP responses.
"""

from .appliances_controller import reference_router
from .appliances_controller import router as appliances_router
from .system_controller import router as system_router

__all__ = ["appliances_router", "reference_router", "system_router"]
