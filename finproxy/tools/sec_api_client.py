"""SEC-API client for filings search.

Endpoint: POST https://api.sec-api.io/filings

The request body is an Elasticsearch-style query_string search. The API key is
sent verbatim in the ``Authorization`` header (no scheme prefix).
"""

import logging
from typing import Any, Dict, List

from finproxy.errors import UpstreamError
from finproxy.models.data import FilingResult
from finproxy.tools.http_client import UpstreamClient

logger = logging.getLogger(__name__)

SEC_API_BASE_URL = "https://api.sec-api.io"
SOURCE_NAME = "SEC-API"


def build_filings_query(ticker: str, forms: List[str], limit: int) -> Dict[str, Any]:
    """Build the filings search body.

    Matches the ticker and any of the given form types, newest first.

    Args:
        ticker: Stock ticker symbol
        forms: Form types to OR together
        limit: Maximum number of results

    Returns:
        JSON-serializable request body
    """
    form_clause = " OR formType:".join(forms)
    return {
        "query": {"query_string": {"query": f"ticker:{ticker} AND (formType:{form_clause})"}},
        "from": 0,
        "size": limit,
        "sort": [{"filedAt": {"order": "desc"}}],
    }


def map_filings(payload: Any, ticker: str) -> List[FilingResult]:
    """Map an upstream search reply to FilingResult records.

    Raises:
        UpstreamError: If the reply is not a JSON object
    """
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise UpstreamError("Unexpected SEC-API reply: expected a JSON object")
    filings = payload.get("filings") or []
    return [
        FilingResult(
            source=SOURCE_NAME,
            company_name=f.get("companyName"),
            ticker=ticker,
            filing_type=f.get("formType"),
            filed_at=f.get("filedAt"),
            accession=f.get("accessionNo"),
            url=f.get("linkToFiling"),
        )
        for f in filings
        if f is not None
    ]


async def search_filings(
    upstream: UpstreamClient,
    api_key: str,
    ticker: str,
    forms: List[str],
    limit: int,
    base_url: str = SEC_API_BASE_URL,
) -> List[FilingResult]:
    """Search SEC-API for a ticker's recent filings.

    Raises:
        UpstreamError: If SEC-API fails or is unreachable
    """
    query = build_filings_query(ticker, forms, limit)
    logger.info(f"Searching SEC-API filings for {ticker} forms={forms} limit={limit}")

    data = await upstream.post_json(
        f"{base_url}/filings",
        query,
        headers={"Content-Type": "application/json", "Authorization": api_key},
    )

    results = map_filings(data, ticker)
    logger.info(f"SEC-API returned {len(results)} filings for {ticker}")
    return results
