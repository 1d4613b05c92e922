"""FastAPI host service for the simulated appliance API.

The host owns the ASGI application and dispatches requests to the
handlers that simulated endpoints register with it. Endpoints only see
the :class:`Router` interface, so a different host can mount them too.

    GET  /health                            -> {"status": "ok", "endpoints": [...]}
    *    /api/appliance/access/<setting>    -> registered handler
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Protocol

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from vapisim import __version__
from vapisim.config.settings import Settings
from vapisim.simulator.registry import registered_endpoints

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Awaitable[Response]]

# Every method is routed to the handler; the handler answers 404 itself
# for the methods it does not support.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class Router(Protocol):
    """Registration interface a host exposes to simulated endpoints."""

    def register_handler(self, path: str, handler: Handler) -> None:
        ...


class HealthResponse(BaseModel):
    status: str = "ok"
    endpoints: list[str] = Field(default_factory=list)


def status_ok(value: Any) -> JSONResponse:
    """Respond with HTTP 200 and ``value`` encoded as JSON."""
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    return JSONResponse(content=value, status_code=200)


class Service:
    """A :class:`Router` backed by a FastAPI application."""

    def __init__(self, settings: Settings | None = None, app: FastAPI | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.app = app if app is not None else FastAPI(
            title="vapisim",
            description="Simulated appliance management API",
            version=__version__,
        )
        self._paths: list[str] = []

    @property
    def paths(self) -> list[str]:
        return list(self._paths)

    def register_handler(self, path: str, handler: Handler) -> None:
        if path in self._paths:
            raise ValueError(f"Handler already registered for {path}")
        self.app.add_api_route(
            path,
            handler,
            methods=ALL_METHODS,
            include_in_schema=False,
        )
        self._paths.append(path)
        logger.debug("Registered handler for %s", path)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the simulator application with every registered endpoint."""
    service = Service(settings)
    for factory in registered_endpoints():
        factory(service)

    app = service.app
    app.state.service = service

    @app.get("/health")
    async def health_check() -> HealthResponse:
        return HealthResponse(status="ok", endpoints=service.paths)

    logger.info("Simulator ready with %d endpoint paths", len(service.paths))
    return app
