"""Entry point for the Customer API.

Starts the FastAPI application under uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``); the database location and store type come
from ``DATABASE_URL`` and ``CUSTOMER_DAO``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from customer_api.app.core.config import settings
from customer_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.api_host, port=settings.api_port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
