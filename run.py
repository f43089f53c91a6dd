"""Entry point for the Team Tracker API server.

Starts uvicorn on the host and port from the settings (``HOST`` and
``PORT`` environment variables, default ``0.0.0.0:3000``) and prints
the listening address and the collection routes once the server is
up.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from team_tracker_api.app.api.v1.router import RESOURCE_PREFIXES
from team_tracker_api.app.core.config import settings
from team_tracker_api.app.main import app


def print_routes(host: str, port: int) -> None:
    """Print the listening address and the base path of each collection."""
    display_host = "localhost" if host in {"0.0.0.0", "::"} else host
    print(f"Server running at: http://{display_host}:{port}")
    print("Available routes:")
    for prefix in RESOURCE_PREFIXES:
        print(f"  {settings.api_prefix}{prefix}")


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    serve_task = asyncio.create_task(server.serve())
    while not server.started and not serve_task.done():
        await asyncio.sleep(0.05)
    if server.started:
        print_routes(settings.host, settings.port)
    await serve_task


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger("team_tracker_api").info("Server stopped")
