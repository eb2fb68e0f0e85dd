"""Finnhub API client for daily candles and company news.

This module provides async functions to fetch data from the Finnhub API:
- Daily OHLCV candles for a date range
- Company news for a trailing window of days

Authentication uses the ``token`` query parameter, always sent last.
"""

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Tuple

from finproxy.errors import BadRequest, UpstreamError
from finproxy.models.data import OhlcvBar, NewsItem
from finproxy.tools.http_client import UpstreamClient

logger = logging.getLogger(__name__)

FINNHUB_BASE_URL = "https://finnhub.io/api/v1"
DAILY_RESOLUTION = "D"
SECONDS_PER_DAY = 86400

CANDLE_FIELDS = ("t", "o", "h", "l", "c", "v")


def to_unix_seconds(value: str) -> int:
    """Convert a YYYY-MM-DD (or ISO-8601) string to Unix seconds.

    Values without a timezone are read as UTC.

    Raises:
        BadRequest: If the value is not a recognizable date
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise BadRequest(f"Invalid date '{value}', expected YYYY-MM-DD")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return math.floor(parsed.timestamp())


def _utc_day(epoch_seconds: float) -> str:
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).strftime("%Y-%m-%d")


def _utc_iso(epoch_seconds: float) -> str:
    # 2023-11-14T22:13:20.000Z
    dt = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ============================================================================
# Candles
# ============================================================================


def map_candles(payload: Any) -> List[OhlcvBar]:
    """Zip Finnhub's parallel candle arrays into OhlcvBar records.

    A status other than "ok" (Finnhub reports "no_data") yields an empty list.

    Raises:
        UpstreamError: If the reply is not a JSON object, or the arrays are
            missing or differ in length
    """
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise UpstreamError("Unexpected Finnhub candle reply: expected a JSON object")
    if payload.get("s") != "ok":
        return []

    arrays = [payload.get(key) for key in CANDLE_FIELDS]
    if any(not isinstance(a, list) for a in arrays):
        raise UpstreamError("Malformed candle data: missing t/o/h/l/c/v arrays")

    lengths = {len(a) for a in arrays}
    if len(lengths) != 1:
        raise UpstreamError(
            f"Malformed candle data: array lengths differ "
            f"({', '.join(f'{k}={len(a)}' for k, a in zip(CANDLE_FIELDS, arrays))})"
        )

    return [
        OhlcvBar(date=_utc_day(t), open=o, high=h, low=lo, close=c, volume=v)
        for t, o, h, lo, c, v in zip(*arrays)
    ]


async def fetch_daily_candles(
    upstream: UpstreamClient,
    api_key: str,
    symbol: str,
    start: str,
    end: str,
    base_url: str = FINNHUB_BASE_URL,
) -> List[OhlcvBar]:
    """Fetch daily OHLCV bars between two dates.

    Endpoint: /stock/candle?symbol=X&resolution=D&from=UNIX&to=UNIX&token=KEY

    Args:
        upstream: Shared upstream client
        api_key: Finnhub API key
        symbol: Stock ticker symbol (sent as given)
        start: First day, YYYY-MM-DD
        end: Last day, YYYY-MM-DD

    Returns:
        List of bars, empty when Finnhub has no data for the range
    """
    from_unix = to_unix_seconds(start)
    to_unix = to_unix_seconds(end)

    logger.info(f"Fetching Finnhub daily candles for {symbol} {start}..{end}")
    data = await upstream.get_json(
        f"{base_url}/stock/candle",
        params={
            "symbol": symbol,
            "resolution": DAILY_RESOLUTION,
            "from": from_unix,
            "to": to_unix,
            "token": api_key,
        },
    )

    bars = map_candles(data)
    if not bars:
        logger.info(f"Finnhub reported no candle data for {symbol} (s={(data or {}).get('s')})")
    return bars


# ============================================================================
# News
# ============================================================================


def news_window(days: int, now: Optional[datetime] = None) -> Tuple[str, str]:
    """Return (from_date, to_date) as UTC YYYY-MM-DD strings."""
    now = now or datetime.now(timezone.utc)
    start = now - timedelta(seconds=days * SECONDS_PER_DAY)
    return (
        start.astimezone(timezone.utc).strftime("%Y-%m-%d"),
        now.astimezone(timezone.utc).strftime("%Y-%m-%d"),
    )


def map_news(payload: Any) -> List[NewsItem]:
    """Map Finnhub company-news articles to NewsItem records."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise UpstreamError("Unexpected Finnhub news reply: expected a JSON array")

    news = []
    for article in payload:
        timestamp = article.get("datetime")
        news.append(NewsItem(
            source=article.get("source"),
            headline=article.get("headline"),
            published_at=_utc_iso(timestamp) if timestamp is not None else None,
            url=article.get("url"),
        ))
    return news


async def fetch_company_news(
    upstream: UpstreamClient,
    api_key: str,
    symbol: str,
    days: int = 30,
    now: Optional[datetime] = None,
    base_url: str = FINNHUB_BASE_URL,
) -> List[NewsItem]:
    """Fetch company news for the trailing ``days`` days.

    Endpoint: /company-news?symbol=X&from=YYYY-MM-DD&to=YYYY-MM-DD&token=KEY
    """
    from_date, to_date = news_window(days, now)

    logger.info(f"Fetching Finnhub news for {symbol} {from_date}..{to_date}")
    data = await upstream.get_json(
        f"{base_url}/company-news",
        params={
            "symbol": symbol,
            "from": from_date,
            "to": to_date,
            "token": api_key,
        },
    )

    return map_news(data)
