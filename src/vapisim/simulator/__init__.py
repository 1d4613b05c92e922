"""Simulator host and simulated endpoints for vapisim.

Importing this package registers the appliance access endpoint, so
``create_app()`` always serves it.

Public API:
    create_app -- Build the FastAPI application
    Service -- FastAPI-backed router endpoints register with
    ApplianceHandler -- The appliance access API simulator
"""

from vapisim.simulator.registry import register_endpoint, registered_endpoints
from vapisim.simulator.service import Router, Service, create_app, status_ok
from vapisim.simulator.appliance import (
    AccessState,
    ApplianceHandler,
    ToggleResource,
    decode,
)

__all__ = [
    "AccessState",
    "ApplianceHandler",
    "Router",
    "Service",
    "ToggleResource",
    "create_app",
    "decode",
    "register_endpoint",
    "registered_endpoints",
    "status_ok",
]
