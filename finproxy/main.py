"""FastAPI application for finproxy - SEC filings and Finnhub market data proxy."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from finproxy import __version__
from finproxy.config import get_settings, Settings
from finproxy.dependencies import (
    get_upstream_client,
    require_sec_api_key,
    require_finnhub_api_key,
)
from finproxy.errors import ProxyError
from finproxy.models import (
    FilingsSearchRequest,
    OhlcvRequest,
    NewsSearchRequest,
    FilingsSearchResponse,
    OhlcvResponse,
    NewsSearchResponse,
    HealthResponse,
    ErrorResponse,
)
from finproxy.tools.http_client import UpstreamClient
from finproxy.tools.sec_api_client import search_filings
from finproxy.tools.finnhub_client import fetch_daily_candles, fetch_company_news

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

XBRL_NOT_IMPLEMENTED = "Not implemented yet. Your backend works; XBRL parsing is an optional upgrade."

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid request fields"},
    500: {"model": ErrorResponse, "description": "Server misconfigured or upstream failure"},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting finproxy backend...")
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info(f"Environment: {settings.app_env}")

    if settings.sec_api_key:
        logger.info("SEC-API key configured")
    else:
        logger.warning("SEC_API_KEY not configured - /filings/search will return 500")
    if settings.finnhub_api_key:
        logger.info("Finnhub key configured")
    else:
        logger.warning("FINNHUB_API_KEY not configured - /market/ohlcv and /news/search will return 500")

    app.state.upstream_client = UpstreamClient.from_settings(settings)

    yield

    await app.state.upstream_client.aclose()
    logger.info("Shutting down finproxy backend...")


# Initialize FastAPI app
app = FastAPI(
    title="finproxy",
    description="Thin JSON proxy over SEC-API filings search and Finnhub market data",
    version=__version__,
    lifespan=lifespan,
)


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the origins listed in CORS_ORIGINS (all origins when empty)."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


settings = get_settings()
configure_cors(app, settings)


# ============================================================================
# Error handlers
# ============================================================================


@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    """Render BadRequest / ServerMisconfigured / UpstreamError as JSON."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors (404, 405) in the same ``error`` shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies as 400 with an ``error`` field."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    message = "Invalid request body"
    if problems:
        message = f"{message}: {'; '.join(problems)}"
    logger.info(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc) or type(exc).__name__},
    )


# ============================================================================
# Routes
# ============================================================================


@app.get("/healthz", response_model=HealthResponse)
async def health_check():
    """Liveness check."""
    return {"ok": True}


@app.post(
    "/filings/search",
    response_model=FilingsSearchResponse,
    responses=ERROR_RESPONSES,
)
async def filings_search(
    request: FilingsSearchRequest,
    api_key: str = Depends(require_sec_api_key),
    upstream: UpstreamClient = Depends(get_upstream_client),
    settings: Settings = Depends(get_settings),
):
    """
    Search SEC-API for a ticker's most recent filings.

    Matches any of ``forms`` (default 10-K, 10-Q, 8-K), newest first,
    capped at ``limit`` results.
    """
    ticker = request.require_fields()
    logger.info(f"Received filings search for {ticker}")

    results = await search_filings(
        upstream,
        api_key,
        ticker,
        request.forms,
        request.limit,
        base_url=settings.sec_api_base_url,
    )
    return FilingsSearchResponse(results=results)


@app.post(
    "/market/ohlcv",
    response_model=OhlcvResponse,
    responses=ERROR_RESPONSES,
)
async def market_ohlcv(
    request: OhlcvRequest,
    api_key: str = Depends(require_finnhub_api_key),
    upstream: UpstreamClient = Depends(get_upstream_client),
    settings: Settings = Depends(get_settings),
):
    """
    Daily OHLCV bars from Finnhub for ``start``..``end`` (YYYY-MM-DD).

    Returns an empty ``ohlcv`` list when Finnhub has no data for the range.
    """
    ticker, start, end = request.require_fields()
    logger.info(f"Received OHLCV request for {ticker} {start}..{end}")

    bars = await fetch_daily_candles(
        upstream,
        api_key,
        ticker,
        start,
        end,
        base_url=settings.finnhub_base_url,
    )
    return OhlcvResponse(ticker=ticker, ohlcv=bars)


@app.post(
    "/news/search",
    response_model=NewsSearchResponse,
    responses=ERROR_RESPONSES,
)
async def news_search(
    request: NewsSearchRequest,
    api_key: str = Depends(require_finnhub_api_key),
    upstream: UpstreamClient = Depends(get_upstream_client),
    settings: Settings = Depends(get_settings),
):
    """Company news from Finnhub for the trailing ``days`` days (default 30)."""
    ticker = request.require_fields()
    logger.info(f"Received news search for {ticker} (last {request.days} days)")

    news = await fetch_company_news(
        upstream,
        api_key,
        ticker,
        days=request.days,
        base_url=settings.finnhub_base_url,
    )
    return NewsSearchResponse(ticker=ticker, news=news)


@app.post(
    "/xbrl/normalize",
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
    responses={501: {"model": ErrorResponse, "description": "XBRL parsing is not available"}},
)
async def xbrl_normalize():
    """Placeholder for XBRL financial-statement normalization."""
    return JSONResponse(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        content={"error": XBRL_NOT_IMPLEMENTED},
    )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "finproxy.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
        log_level=settings.log_level.lower(),
    )
