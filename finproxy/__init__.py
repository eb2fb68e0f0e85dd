"""finproxy - JSON proxy for SEC filings, market candles and company news."""

__version__ = "1.0.0"
