"""Request models for API endpoints.

Fields are optional at the schema level so that a missing ticker becomes a
400 with an ``error`` body instead of FastAPI's 422. Each model's
``require_fields`` performs the presence check explicitly.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from finproxy.errors import BadRequest

DEFAULT_FORMS = ["10-K", "10-Q", "8-K"]


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


class FilingsSearchRequest(BaseModel):
    """Request model for the filings search endpoint.

    Attributes:
        ticker: Stock ticker symbol (e.g., 'AAPL')
        forms: SEC form types to match
        limit: Maximum number of filings to return
    """

    ticker: Optional[str] = Field(None, examples=["AAPL", "MSFT"])
    forms: List[str] = Field(default_factory=lambda: list(DEFAULT_FORMS))
    limit: int = Field(default=5, description="Maximum number of filings")

    @field_validator("ticker")
    @classmethod
    def validate_ticker(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    def require_fields(self) -> str:
        """Return the ticker, raising BadRequest if it is absent."""
        if not self.ticker:
            raise BadRequest("ticker is required")
        return self.ticker


class OhlcvRequest(BaseModel):
    """Request model for the daily OHLCV endpoint.

    Attributes:
        ticker: Stock ticker symbol
        start: First day of the range, YYYY-MM-DD
        end: Last day of the range, YYYY-MM-DD
    """

    ticker: Optional[str] = Field(None, examples=["AAPL"])
    start: Optional[str] = Field(None, examples=["2024-01-02"])
    end: Optional[str] = Field(None, examples=["2024-01-31"])

    @field_validator("ticker", "start", "end")
    @classmethod
    def validate_text(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    def require_fields(self) -> Tuple[str, str, str]:
        """Return (ticker, start, end), raising BadRequest if any is absent."""
        if not self.ticker or not self.start or not self.end:
            raise BadRequest("ticker, start, end are required (YYYY-MM-DD)")
        return self.ticker, self.start, self.end


class NewsSearchRequest(BaseModel):
    """Request model for the company news endpoint.

    Attributes:
        ticker: Stock ticker symbol
        days: Size of the trailing window in days
    """

    ticker: Optional[str] = Field(None, examples=["AAPL"])
    days: int = Field(default=30, description="Trailing window in days")

    @field_validator("ticker")
    @classmethod
    def validate_ticker(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    def require_fields(self) -> str:
        """Return the ticker, raising BadRequest if it is absent."""
        if not self.ticker:
            raise BadRequest("ticker is required")
        return self.ticker
