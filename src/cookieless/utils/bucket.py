"""Coarse time windows that drive fingerprint rotation."""

import math
import time
from datetime import datetime, timezone
from typing import Optional, Union

from ..errors import InvalidConfiguration

SECONDS_PER_DAY = 86400

Timestamp = Union[datetime, int, float]


def unix_seconds(now: Optional[Timestamp] = None) -> float:
    """Seconds since the Unix epoch. Naive datetimes are taken as UTC."""
    if now is None:
        return time.time()
    if isinstance(now, datetime):
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now.timestamp()
    return float(now)


def validate_period(validity_period_days: float) -> float:
    """Return the period as a float, or raise InvalidConfiguration."""
    try:
        days = float(validity_period_days)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(
            f"Validity period must be a number, got {validity_period_days!r}",
            field="validity_period_days",
        ) from exc
    # NaN fails this comparison too
    if not days > 0 or math.isinf(days):
        raise InvalidConfiguration(
            f"Validity period must be a positive number of days, got {validity_period_days!r}",
            field="validity_period_days",
        )
    return days


def epoch_bucket(now: Optional[Timestamp] = None, validity_period_days: float = 4) -> int:
    """Index of the validity window containing ``now``.

    The value is ``floor(seconds / 86400 / validity_period_days)`` and
    advances by exactly one each time a period elapses.
    """
    days = validate_period(validity_period_days)
    return math.floor(unix_seconds(now) / SECONDS_PER_DAY / days)
