"""Entry point for the Flight Registration API.

Serves the FastAPI application with Uvicorn.  Host and port come from
the ``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8080``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from flight_registration_api.app.core.config import settings
from flight_registration_api.app.main import app


async def main() -> None:
    """Start the API server."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
