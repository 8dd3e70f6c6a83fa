"""Cookieless, privacy-focused client ids for web analytics."""

from .config import TrackingSettings, get_settings, resolve_settings
from .errors import CookielessError, InvalidConfiguration
from .utils import (
    VisitorAttributes,
    composite_key,
    compute_fingerprint,
    cyrb53,
    epoch_bucket,
    fingerprint_visitor,
)

__version__ = "1.0.0"

__all__ = [
    "TrackingSettings",
    "get_settings",
    "resolve_settings",
    "CookielessError",
    "InvalidConfiguration",
    "VisitorAttributes",
    "composite_key",
    "compute_fingerprint",
    "cyrb53",
    "epoch_bucket",
    "fingerprint_visitor",
]
