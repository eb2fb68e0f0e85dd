"""Response models for API endpoints."""

from typing import List

from pydantic import BaseModel, Field

from .data import FilingResult, OhlcvBar, NewsItem


class FilingsSearchResponse(BaseModel):
    """Response for POST /filings/search."""

    results: List[FilingResult] = Field(default_factory=list)


class OhlcvResponse(BaseModel):
    """Response for POST /market/ohlcv.

    An empty ``ohlcv`` list means the provider reported no data for the range.
    """

    ticker: str
    ohlcv: List[OhlcvBar] = Field(default_factory=list)


class NewsSearchResponse(BaseModel):
    """Response for POST /news/search."""

    ticker: str
    news: List[NewsItem] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    """JSON body returned for every failed request."""

    error: str
