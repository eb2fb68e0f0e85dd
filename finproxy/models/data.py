"""Records produced by mapping upstream provider payloads."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FilingResult(BaseModel):
    """A single SEC filing as returned by the filings search.

    Serialized with camelCase keys (companyName, filingType, filedAt).

    Attributes:
        source: Provider name, always 'SEC-API'
        company_name: Filer name
        ticker: Ticker the search was made for
        filing_type: Form type (10-K, 8-K, ...)
        filed_at: Filing timestamp as reported upstream
        accession: Accession number
        url: Link to the filing document
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    source: str = "SEC-API"
    company_name: Optional[str] = None
    ticker: str
    filing_type: Optional[str] = None
    filed_at: Optional[str] = None
    accession: Optional[str] = None
    url: Optional[str] = None


class OhlcvBar(BaseModel):
    """Daily OHLCV price bar.

    Attributes:
        date: Trading day, YYYY-MM-DD (UTC)
        open: Opening price
        high: High price
        low: Low price
        close: Closing price
        volume: Trading volume
    """

    date: str
    open: Optional[Union[int, float]] = None
    high: Optional[Union[int, float]] = None
    low: Optional[Union[int, float]] = None
    close: Optional[Union[int, float]] = None
    volume: Optional[Union[int, float]] = None


class NewsItem(BaseModel):
    """Company news article."""

    source: Optional[str] = None
    headline: Optional[str] = None
    published_at: Optional[str] = None
    url: Optional[str] = None
