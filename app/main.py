"""
ASGI entry point.

Run with ``python -m app.main`` or ``uvicorn app.main:app``; CONFIG_FILE
selects the TOML file in ``app/cfg`` (development.toml by default).
"""
import logging
import os

import uvicorn

from app.create_app import get_app
from app.utils.constants import ConfigFile

app = get_app(os.environ.get("CONFIG_FILE", ConfigFile.DEVELOPMENT))


@app.get("/")
async def root():
    """Service banner with links to the API docs."""
    return {
        "message": app.title,
        "version": app.version,
        "docs": app.docs_url,
        "redoc": app.redoc_url,
    }


@app.get("/health")
async def health_check():
    """Liveness check."""
    return {"status": "healthy", "service": "green-campus-carbon-tracker"}


if __name__ == "__main__":
    try:
        uvicorn.run(
            app,
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", 8000)),
            log_level="debug" if app.debug else "info",
            loop="asyncio",
        )
    except Exception as e:
        logging.error(f"Error running Green Campus API: {e}")
