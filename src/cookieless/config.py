"""Tracking configuration.

Settings are plain values handed to the fingerprint functions by the
caller; nothing in ``cookieless.utils`` reads configuration on its own.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import InvalidConfiguration
from .schema import SETTINGS_FIELDS


class TrackingSettings(BaseSettings):
    """Settings for cookieless client ids.

    Attributes:
        tracking_id: Analytics property id (empty = tracking disabled)
        validity_period_days: Days a client id stays stable before rotating
        enable_for_admins: Also track privileged users
        hash_seed: 32-bit seed mixed into every hash
        admin_path_prefixes: Backend paths that are never tracked
        trust_forwarded_for: Read the client address from X-Forwarded-For
    """

    model_config = SettingsConfigDict(env_prefix="COOKIELESS_", env_file=".env", extra="ignore")

    tracking_id: str = ""
    validity_period_days: float = Field(default=4.0, gt=0, allow_inf_nan=False)
    enable_for_admins: bool = False
    hash_seed: int = Field(default=0, ge=0, le=0xFFFFFFFF)
    admin_path_prefixes: list[str] = Field(default_factory=lambda: ["/admin"])
    trust_forwarded_for: bool = False

    def is_enabled(self) -> bool:
        """Check if a tracking id is configured."""
        return bool(self.tracking_id)

    def is_admin_path(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.admin_path_prefixes)


def resolve_settings(stored: Mapping[str, Any], **overrides: Any) -> TrackingSettings:
    """Build settings from a key/value option store.

    Fields declared in the settings schema fall back to their default
    when the stored value is missing, None or "", so an unchecked box or a
    cleared input behaves like a fresh install. A stored 0 is kept and
    rejected by validation.

    Raises:
        InvalidConfiguration: if a stored value fails validation
    """
    values: dict[str, Any] = {}
    for descriptor in SETTINGS_FIELDS:
        value = stored.get(descriptor.uid)
        values[descriptor.uid] = value if value not in (None, "") else descriptor.default
    values.update(overrides)

    try:
        return TrackingSettings(**values)
    except ValidationError as exc:
        errors = exc.errors()
        field = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
        raise InvalidConfiguration(
            f"Invalid tracking settings: {errors[0]['msg'] if errors else exc}",
            field=field,
            details={"errors": [{"loc": list(e["loc"]), "msg": e["msg"]} for e in errors]},
        ) from exc


@lru_cache
def get_settings() -> TrackingSettings:
    """Get cached settings loaded from the environment."""
    return TrackingSettings()
