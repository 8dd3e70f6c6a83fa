"""Pure helpers for cookieless visitor identifiers."""

from .bucket import epoch_bucket
from .fingerprint import (
    VisitorAttributes,
    composite_key,
    compute_fingerprint,
    cyrb53,
    fingerprint_visitor,
)

__all__ = [
    "epoch_bucket",
    "VisitorAttributes",
    "composite_key",
    "compute_fingerprint",
    "cyrb53",
    "fingerprint_visitor",
]
