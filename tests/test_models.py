"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from finproxy.errors import BadRequest
from finproxy.models.data import FilingResult, OhlcvBar, NewsItem
from finproxy.models.request import FilingsSearchRequest, OhlcvRequest, NewsSearchRequest
from finproxy.models.response import FilingsSearchResponse, OhlcvResponse


class TestFilingsSearchRequest:
    """Tests for FilingsSearchRequest model."""

    def test_defaults(self):
        request = FilingsSearchRequest(ticker="AAPL")

        assert request.forms == ["10-K", "10-Q", "8-K"]
        assert request.limit == 5

    def test_defaults_are_not_shared(self):
        first = FilingsSearchRequest(ticker="AAPL")
        first.forms.append("S-1")

        assert FilingsSearchRequest(ticker="AAPL").forms == ["10-K", "10-Q", "8-K"]

    def test_ticker_whitespace_stripped(self):
        request = FilingsSearchRequest(ticker="  MSFT ")

        assert request.require_fields() == "MSFT"

    def test_ticker_case_preserved(self):
        assert FilingsSearchRequest(ticker="brk.a").require_fields() == "brk.a"

    @pytest.mark.parametrize("ticker", [None, "", "   "])
    def test_missing_ticker(self, ticker):
        request = FilingsSearchRequest(ticker=ticker)

        with pytest.raises(BadRequest) as exc_info:
            request.require_fields()

        assert exc_info.value.message == "ticker is required"
        assert exc_info.value.status_code == 400

    def test_invalid_limit(self):
        with pytest.raises(ValidationError):
            FilingsSearchRequest(ticker="AAPL", limit="many")


class TestOhlcvRequest:
    """Tests for OhlcvRequest model."""

    def test_require_fields(self):
        request = OhlcvRequest(ticker="AAPL", start="2024-01-02", end="2024-01-31")

        assert request.require_fields() == ("AAPL", "2024-01-02", "2024-01-31")

    @pytest.mark.parametrize(
        "fields",
        [
            {"ticker": "AAPL", "start": "2024-01-02"},
            {"ticker": "AAPL", "end": "2024-01-31"},
            {"start": "2024-01-02", "end": "2024-01-31"},
            {"ticker": "AAPL", "start": "", "end": "2024-01-31"},
        ],
    )
    def test_missing_fields(self, fields):
        with pytest.raises(BadRequest, match="ticker, start, end are required"):
            OhlcvRequest(**fields).require_fields()


class TestNewsSearchRequest:
    """Tests for NewsSearchRequest model."""

    def test_default_days(self):
        assert NewsSearchRequest(ticker="AAPL").days == 30

    def test_missing_ticker(self):
        with pytest.raises(BadRequest):
            NewsSearchRequest(days=5).require_fields()


class TestFilingResult:
    """Tests for FilingResult serialization."""

    def test_camel_case_output(self):
        result = FilingResult(
            company_name="Apple Inc.",
            ticker="AAPL",
            filing_type="10-K",
            filed_at="2023-11-03T06:01:36-04:00",
            accession="0000320193-23-000106",
            url="https://www.sec.gov/Archives/edgar/data/320193/000032019323000106/0000320193-23-000106-index.htm",
        )

        assert result.model_dump(by_alias=True) == {
            "source": "SEC-API",
            "companyName": "Apple Inc.",
            "ticker": "AAPL",
            "filingType": "10-K",
            "filedAt": "2023-11-03T06:01:36-04:00",
            "accession": "0000320193-23-000106",
            "url": "https://www.sec.gov/Archives/edgar/data/320193/000032019323000106/0000320193-23-000106-index.htm",
        }

    def test_accepts_camel_case_input(self):
        result = FilingResult.model_validate({"ticker": "AAPL", "companyName": "Apple Inc."})

        assert result.company_name == "Apple Inc."

    def test_ticker_required(self):
        with pytest.raises(ValidationError):
            FilingResult(company_name="Apple Inc.")

    def test_nested_response_uses_aliases(self):
        response = FilingsSearchResponse(results=[FilingResult(ticker="AAPL", filing_type="8-K")])

        dumped = response.model_dump(by_alias=True)
        assert dumped["results"][0]["filingType"] == "8-K"


class TestOhlcvModels:
    """Tests for OhlcvBar and OhlcvResponse."""

    def test_field_order(self):
        bar = OhlcvBar(date="2023-11-14", open=10, high=11, low=9, close=10.5, volume=1000)

        assert list(bar.model_dump().keys()) == ["date", "open", "high", "low", "close", "volume"]

    def test_empty_response(self):
        assert OhlcvResponse(ticker="AAPL").model_dump() == {"ticker": "AAPL", "ohlcv": []}


class TestNewsItem:
    """Tests for NewsItem model."""

    def test_all_fields_optional(self):
        assert NewsItem().model_dump() == {
            "source": None,
            "headline": None,
            "published_at": None,
            "url": None,
        }
