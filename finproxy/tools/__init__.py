"""Upstream provider clients."""

from .http_client import UpstreamClient
from .sec_api_client import search_filings, build_filings_query
from .finnhub_client import fetch_daily_candles, fetch_company_news

__all__ = [
    "UpstreamClient",
    "search_filings",
    "build_filings_query",
    "fetch_daily_candles",
    "fetch_company_news",
]
