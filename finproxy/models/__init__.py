"""Pydantic models for data validation and serialization."""

from .request import FilingsSearchRequest, OhlcvRequest, NewsSearchRequest
from .response import (
    FilingsSearchResponse,
    OhlcvResponse,
    NewsSearchResponse,
    HealthResponse,
    ErrorResponse,
)
from .data import FilingResult, OhlcvBar, NewsItem

__all__ = [
    "FilingsSearchRequest",
    "OhlcvRequest",
    "NewsSearchRequest",
    "FilingsSearchResponse",
    "OhlcvResponse",
    "NewsSearchResponse",
    "HealthResponse",
    "ErrorResponse",
    "FilingResult",
    "OhlcvBar",
    "NewsItem",
]
