#!/usr/bin/env python
"""Convenience script to run the finproxy API server."""

import uvicorn
from finproxy.config import get_settings

if __name__ == "__main__":
    settings = get_settings()

    uvicorn.run(
        "finproxy.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
        log_level=settings.log_level.lower(),
    )
