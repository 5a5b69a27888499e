"""Entry point for the Carreras API.

Starts the FastAPI application under uvicorn.  Configuration such as
``KV_REST_API_URL``, ``KV_REST_API_TOKEN``, ``API_HOST`` and
``API_PORT`` is read from the environment; the server refuses to start
when the store credentials are missing.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from carreras_api.app.core.config import settings
from carreras_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
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
        logging.getLogger(__name__).info("Server stopped")
