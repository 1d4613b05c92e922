"""Appliance access settings for vapisim.

Shapes and resource paths of the four access toggles, plus an async
HTTP client for reading and changing them.

Public API:
    AccessSetting -- Enumeration of the toggles (name, path, model)
    ConsoleCliAccess, DcuiAccess, SshAccess, ShellAccess -- Setting shapes
    ApplianceAccessClient -- httpx client for the access API
"""

from vapisim.access.models import (
    AccessModel,
    AccessSetting,
    ConsoleCliAccess,
    DcuiAccess,
    ShellAccess,
    SshAccess,
)

__all__ = [
    "AccessModel",
    "AccessSetting",
    "ConsoleCliAccess",
    "DcuiAccess",
    "ShellAccess",
    "SshAccess",
    "ApplianceAccessClient",
    "AccessClientError",
]


def __getattr__(name: str) -> type:
    """Lazy import for the client, which requires httpx."""
    if name == "ApplianceAccessClient":
        from vapisim.access.client import ApplianceAccessClient
        return ApplianceAccessClient
    if name == "AccessClientError":
        from vapisim.access.client import AccessClientError
        return AccessClientError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
