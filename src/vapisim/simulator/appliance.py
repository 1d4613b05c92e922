"""Simulated appliance access API.

Serves the four access toggles of the appliance management API:

    GET  /api/appliance/access/consolecli  -> {"enabled": false}
    PUT  /api/appliance/access/consolecli  <- {"enabled": true}     (204)
    GET  /api/appliance/access/dcui        -> {"enabled": false}
    PUT  /api/appliance/access/dcui        <- {"enabled": true}     (204)
    GET  /api/appliance/access/ssh         -> {"enabled": false}
    PUT  /api/appliance/access/ssh         <- {"enabled": true}     (204)
    GET  /api/appliance/access/shell       -> {"enabled": false, "timeout": 0}
    PUT  /api/appliance/access/shell       <- {"enabled": true, "timeout": 30}  (204)

A PUT body that does not decode into the setting's shape is answered
with an empty 500; any other method gets a 404.
"""

from __future__ import annotations

import logging
import threading
from functools import partial
from typing import Callable, Mapping

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from vapisim.access.models import AccessModel, AccessSetting
from vapisim.config.settings import ApplianceConfig
from vapisim.simulator.registry import register_endpoint
from vapisim.simulator.service import Router, Service, status_ok

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


class AccessState:
    """In-memory access settings of one simulated appliance.

    Values are immutable models, so reads hand out the stored instance
    and writes replace it. The lock serializes replacements coming from
    a threaded dispatcher.
    """

    def __init__(self, values: Mapping[AccessSetting, AccessModel] | None = None) -> None:
        self._lock = threading.Lock()
        self._values: dict[AccessSetting, AccessModel] = {
            setting: setting.model() for setting in AccessSetting
        }
        for setting, value in (values or {}).items():
            self.set(setting, value)

    @classmethod
    def from_config(cls, config: ApplianceConfig) -> AccessState:
        """Build the initial state from the ``appliance`` config section."""
        return cls({
            AccessSetting.CONSOLE_CLI: AccessSetting.CONSOLE_CLI.model(enabled=config.consolecli_enabled),
            AccessSetting.DCUI: AccessSetting.DCUI.model(enabled=config.dcui_enabled),
            AccessSetting.SSH: AccessSetting.SSH.model(enabled=config.ssh_enabled),
            AccessSetting.SHELL: AccessSetting.SHELL.model(
                enabled=config.shell_enabled, timeout=config.shell_timeout,
            ),
        })

    def get(self, setting: AccessSetting) -> AccessModel:
        with self._lock:
            return self._values[AccessSetting(setting)]

    def set(self, setting: AccessSetting, value: AccessModel) -> None:
        setting = AccessSetting(setting)
        if not isinstance(value, setting.model):
            raise TypeError(
                f"{setting.value} expects {setting.model.__name__}, got {type(value).__name__}"
            )
        with self._lock:
            self._values[setting] = value

    def snapshot(self) -> dict[AccessSetting, AccessModel]:
        """Copy of all current values."""
        with self._lock:
            return dict(self._values)


# ---------------------------------------------------------------------------
# Request handling
# ---------------------------------------------------------------------------


async def decode(request: Request, model: type[AccessModel]) -> AccessModel | None:
    """Decode the request body into ``model``.

    Returns None when the body is not JSON of the expected shape; the
    failure is logged with the request method and URI.
    """
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"
        logger.warning("%s %s: %s", request.method, uri, e)
        return None


class ToggleResource:
    """GET/PUT handler for one access setting.

    Parameterized by the setting's model and a get/set accessor pair,
    so the same handler serves every toggle.
    """

    def __init__(
        self,
        path: str,
        model: type[AccessModel],
        getter: Callable[[], AccessModel],
        setter: Callable[[AccessModel], None],
    ) -> None:
        self.path = path
        self.model = model
        self._get = getter
        self._set = setter

    async def serve(self, request: Request) -> Response:
        if request.method == "GET":
            return status_ok(self._get())
        if request.method == "PUT":
            value = await decode(request, self.model)
            if value is None:
                return Response(status_code=500)
            self._set(value)
            return Response(status_code=204)
        return PlainTextResponse("404 page not found", status_code=404)


class ApplianceHandler:
    """The appliance access API simulator.

    Each handler owns its state, so every simulated appliance is
    isolated from the others.
    """

    def __init__(self, state: AccessState | None = None) -> None:
        self.state = state if state is not None else AccessState()
        self.resources = [
            ToggleResource(
                path=setting.path,
                model=setting.model,
                getter=partial(self.state.get, setting),
                setter=partial(self.state.set, setting),
            )
            for setting in AccessSetting
        ]

    def register(self, router: Router) -> None:
        """Register the access API paths with the host router."""
        for resource in self.resources:
            router.register_handler(resource.path, resource.serve)


@register_endpoint
def register_appliance(service: Service) -> None:
    state = AccessState.from_config(service.settings.appliance)
    ApplianceHandler(state).register(service)
