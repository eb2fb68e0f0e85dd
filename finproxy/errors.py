"""Error types surfaced by the proxy.

Every error carries the HTTP status it maps to. The application's exception
handlers turn them into ``{"error": message}`` bodies.
"""

from typing import Optional

from fastapi import status


class ProxyError(Exception):
    """Base class for errors returned to the client as JSON."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(ProxyError):
    """Required input is missing or unparseable."""

    status_code = status.HTTP_400_BAD_REQUEST


class ServerMisconfigured(ProxyError):
    """A required upstream credential is not configured."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, setting_name: str):
        super().__init__(f"Server missing {setting_name}")
        self.setting_name = setting_name


class UpstreamError(ProxyError):
    """A provider call failed or returned something unusable."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
