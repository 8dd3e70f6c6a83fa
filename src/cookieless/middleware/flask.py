"""Flask integration for cookieless client ids."""
# NOTE: No cookies are read or written here; the id is recomputed per request

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from flask import Flask, current_app, g, request

from ..config import TrackingSettings, get_settings
from ..errors import InvalidConfiguration
from ..utils.fingerprint import VisitorAttributes, fingerprint_visitor

logger = logging.getLogger(__name__)

EXTENSION_KEY = "cookieless"


def init_app(
    app: Flask,
    settings: Optional[TrackingSettings] = None,
    is_privileged: Optional[Callable[[], bool]] = None,
) -> None:
    """Initialize cookieless tracking for a Flask app.

    ``is_privileged`` is called inside the request and should report
    whether the current user has admin rights.
    """
    app.extensions[EXTENSION_KEY] = settings or get_settings()

    @app.before_request
    def before_request():
        settings = _settings()
        if _should_skip(settings, is_privileged):
            return

        attributes = _visitor_attributes(settings)
        try:
            client_id = fingerprint_visitor(
                attributes, settings, datetime.now(timezone.utc)
            )
        except InvalidConfiguration as exc:
            logger.error(
                "Client id disabled for this request: %s", exc.to_dict(), exc_info=True
            )
            return

        g.cookieless_client_id = client_id

    @app.context_processor
    def inject_client_id():
        settings = _settings()
        return {
            "cookieless_client_id": get_client_id(),
            "cookieless_tracking_id": settings.tracking_id,
        }


def get_client_id() -> Optional[str]:
    """Client id computed for the current request, if tracking applies."""
    return g.get("cookieless_client_id")


def _settings() -> TrackingSettings:
    return current_app.extensions[EXTENSION_KEY]


def _should_skip(
    settings: TrackingSettings, is_privileged: Optional[Callable[[], bool]]
) -> bool:
    """Check if request should skip tracking."""
    if not settings.is_enabled():
        logger.debug("Tracking disabled: no tracking id configured")
        return True
    if settings.is_admin_path(request.path):
        logger.debug("Skipping admin path %s", request.path)
        return True
    if not settings.enable_for_admins and is_privileged is not None and is_privileged():
        logger.debug("Skipping privileged user")
        return True
    return False


def _visitor_attributes(settings: TrackingSettings) -> VisitorAttributes:
    return VisitorAttributes(
        remote_address=_get_client_ip(settings),
        site_host=request.host,
        user_agent=request.headers.get("User-Agent", ""),
        accept_language=request.accept_languages.best or "",
    )


def _get_client_ip(settings: TrackingSettings) -> str:
    """Get client IP, honouring X-Forwarded-For only when configured."""
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("X-Forwarded-For", "")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.remote_addr or ""
