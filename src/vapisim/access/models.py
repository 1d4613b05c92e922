"""Access setting models for the appliance management API.

Each access method of the appliance (console CLI, DCUI, SSH, shell) is
a small JSON document with an ``enabled`` flag. The shell setting also
carries a ``timeout`` in seconds. Values are immutable: a PUT replaces
the whole document.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Range of the appliance API integer type.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Setting shapes
# ---------------------------------------------------------------------------


class AccessModel(BaseModel):
    """Common base for access settings.

    Decoding is strict (``"true"`` is not a boolean, ``30.5`` is not a
    timeout), keys match field names case-insensitively, unknown fields
    are ignored and missing fields keep their defaults.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    enabled: bool = Field(default=False, description="Whether the access method is enabled")

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        """Map keys such as ``Enabled`` onto their field; an exact key wins."""
        if not isinstance(data, dict):
            return data
        matched = dict(data)
        for name in cls.model_fields:
            if name in data:
                continue
            for key, value in data.items():
                if isinstance(key, str) and key.casefold() == name.casefold():
                    matched[name] = value
                    break
        return matched


class ConsoleCliAccess(AccessModel):
    """Console-based controlled CLI access."""


class DcuiAccess(AccessModel):
    """Direct Console User Interface access."""


class SshAccess(AccessModel):
    """SSH-based controlled CLI access."""


class ShellAccess(AccessModel):
    """BASH shell access, with the time it stays enabled."""

    timeout: int = Field(
        default=0, ge=INT64_MIN, le=INT64_MAX, description="Seconds the shell stays enabled",
    )


# ---------------------------------------------------------------------------
# Setting catalogue
# ---------------------------------------------------------------------------

ACCESS_BASE_PATH = "/api/appliance/access"


class AccessSetting(str, enum.Enum):
    """The access toggles exposed by the appliance."""

    CONSOLE_CLI = "consolecli"
    DCUI = "dcui"
    SSH = "ssh"
    SHELL = "shell"

    @property
    def path(self) -> str:
        return f"{ACCESS_BASE_PATH}/{self.value}"

    @property
    def model(self) -> type[AccessModel]:
        return _MODELS[self]


_MODELS: dict[AccessSetting, type[AccessModel]] = {
    AccessSetting.CONSOLE_CLI: ConsoleCliAccess,
    AccessSetting.DCUI: DcuiAccess,
    AccessSetting.SSH: SshAccess,
    AccessSetting.SHELL: ShellAccess,
}
