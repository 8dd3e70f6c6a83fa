"""Visitor fingerprint generation — cyrb53 over ip;host;ua;language;bucket."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

from .bucket import Timestamp, epoch_bucket

if TYPE_CHECKING:
    from ..config import TrackingSettings

DELIMITER = ";"

_MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class VisitorAttributes:
    """Request attributes that approximate a single visitor."""

    remote_address: str = ""
    site_host: str = ""
    user_agent: str = ""
    accept_language: str = ""


def _mul32(a: int, b: int) -> int:
    return (a * b) & _MASK32


def _char_codes(text: str) -> Iterator[int]:
    # UTF-16 code units, the same values String.charCodeAt returns
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def cyrb53(text: str, seed: int = 0, *, chained: bool = False) -> str:
    """Hash ``text`` to a 53-bit integer rendered as lowercase hex.

    A fast two-lane mixing hash with good avalanche behaviour. It is not
    a cryptographic hash.

    Both finalization lines read the state left by the character loop.
    With ``chained=True`` the second line reads the freshly finalized
    ``h1`` instead, which is what the browser snippet computes.
    """
    seed &= _MASK32
    h1 = 0xDEADBEEF ^ seed
    h2 = 0x41C6CE57 ^ seed
    for ch in _char_codes(text):
        h1 = _mul32(h1 ^ ch, 2654435761)
        h2 = _mul32(h2 ^ ch, 1597334677)

    a, b = h1, h2
    h1 = _mul32(a ^ (a >> 16), 2246822507) ^ _mul32(b ^ (b >> 13), 3266489909)
    if chained:
        a = h1
    h2 = _mul32(b ^ (b >> 16), 2246822507) ^ _mul32(a ^ (a >> 13), 3266489909)

    return format(((h2 & 0x1FFFFF) << 32) + h1, "x")


def composite_key(
    remote_address: str,
    site_host: str,
    user_agent: str,
    accept_language: str,
    bucket: int,
) -> str:
    """Join the visitor attributes and the time bucket into the hash input.

    Field order and delimiter are fixed; changing either changes every
    identifier ever issued.
    """
    return DELIMITER.join(
        [remote_address, site_host, user_agent, accept_language, str(bucket)]
    )


def compute_fingerprint(
    remote_address: str,
    site_host: str,
    user_agent: str,
    accept_language: str,
    validity_period_days: float,
    now: Optional[Timestamp] = None,
    *,
    seed: int = 0,
) -> str:
    """Compute the pseudonymous client id for one request.

    Raises InvalidConfiguration when ``validity_period_days`` is not positive.
    """
    bucket = epoch_bucket(now, validity_period_days)
    key = composite_key(
        remote_address or "",
        site_host or "",
        user_agent or "",
        accept_language or "",
        bucket,
    )
    return cyrb53(key, seed)


def fingerprint_visitor(
    attributes: VisitorAttributes,
    settings: "TrackingSettings",
    now: Optional[Timestamp] = None,
) -> str:
    """Compute the client id for ``attributes`` using an explicit settings object."""
    return compute_fingerprint(
        attributes.remote_address,
        attributes.site_host,
        attributes.user_agent,
        attributes.accept_language,
        settings.validity_period_days,
        now,
        seed=settings.hash_seed,
    )
