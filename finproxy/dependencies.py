"""FastAPI dependencies shared by the route handlers."""

from fastapi import Depends, Request

from finproxy.config import Settings, get_settings
from finproxy.errors import ServerMisconfigured
from finproxy.tools.http_client import UpstreamClient


def get_upstream_client(request: Request) -> UpstreamClient:
    """Return the upstream client created in the application lifespan."""
    return request.app.state.upstream_client


def require_sec_api_key(settings: Settings = Depends(get_settings)) -> str:
    """Return the SEC-API key or fail with ServerMisconfigured."""
    if not settings.sec_api_key:
        raise ServerMisconfigured("SEC_API_KEY")
    return settings.sec_api_key


def require_finnhub_api_key(settings: Settings = Depends(get_settings)) -> str:
    """Return the Finnhub key or fail with ServerMisconfigured."""
    if not settings.finnhub_api_key:
        raise ServerMisconfigured("FINNHUB_API_KEY")
    return settings.finnhub_api_key
