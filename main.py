"""Entry point for the calculator and browser automation MCP server.

Exposes four tools (``add``, ``calculate``, ``playwright_navigate`` and
``playwright_scrape``) over two MCP transports:

- ``/sse`` and ``/sse/message``: server-sent events transport
- ``/mcp``: Streamable HTTP transport

Every other path answers ``404 Not found``.  The server has no
authentication; do not expose it publicly.
"""

from __future__ import annotations

import argparse
import contextlib
import logging
from dataclasses import replace
from typing import AsyncIterator, List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware

from config import Settings
from tools import build_registry
from tools.logger import configure_logging
from transport import SseTransport, StreamableHttpTransport, TransportRouter, build_server

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the registry, protocol server and HTTP application.

    All state is created here, once, and handed down explicitly.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    registry = build_registry(settings)
    server = build_server(registry, settings)
    sse = SseTransport(server)
    streamable_http = StreamableHttpTransport(
        server, json_response=settings.json_response, stateless=settings.stateless
    )

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with streamable_http.run():
            logger.info(
                "%s %s ready with %d tools",
                settings.server_name,
                settings.server_version,
                len(registry),
            )
            yield
        logger.info("Shutting down")

    app = FastAPI(
        title=settings.server_name,
        version=settings.server_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry
    app.state.mcp_server = server

    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )
    app.mount("/", TransportRouter(sse=sse, streamable_http=streamable_http))
    return app


def main(argv: Optional[List[str]] = None) -> None:
    """Parse command-line arguments and start the HTTP server."""
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Calculator and browser automation MCP server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument(
        "--list-tools", action="store_true", help="Print the registered tools and exit"
    )
    args = parser.parse_args(argv)

    if args.list_tools:
        for definition in build_registry(settings):
            print(f"{definition.name}: {definition.description}")
        return

    import uvicorn

    settings = replace(settings, host=args.host, port=args.port, log_level=args.log_level.upper())
    app = create_app(settings)
    # Warning: the server has no authentication; keep it off the public internet.
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
