"""FastAPI application exposing the sync gateway over HTTP+JSON.

Studio's plugin POSTs full snapshots to ``/sync``; the IDE view, the MCP
tools and the CLI read ``/tree``, ``/status``, ``/tree/text`` and
``/search``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from loguru import logger
from starlette.concurrency import run_in_threadpool

from roblox_directory_tree import __version__
from roblox_directory_tree.config import DEFAULT_HOST, DEFAULT_PORT, SERVER_NAME
from roblox_directory_tree.core.sync.gateway import SyncGateway
from roblox_directory_tree.core.sync.parser import SnapshotParseError
from roblox_directory_tree.models.node import Snapshot
from roblox_directory_tree.server.debug_page import DEBUG_PAGE


def _log_snapshot(snapshot: Snapshot) -> None:
    logger.info(
        "Received snapshot from Studio: {!r} ({} containers)",
        snapshot.name,
        len(snapshot.containers),
    )


def create_app(gateway: SyncGateway | None = None) -> FastAPI:
    """Build the tree server application.

    Args:
        gateway: Gateway to serve. When omitted a fresh one is created and
            closed at shutdown; an injected gateway stays open for its owner.

    Returns:
        The configured ASGI application.
    """
    owned = gateway is None
    gateway = gateway or SyncGateway()

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Directory tree server starting (version {})", __version__)
        unsubscribe = gateway.subscribe(_log_snapshot)
        try:
            yield
        finally:
            unsubscribe()
            if owned:
                gateway.close()
            logger.info("Directory tree server stopped")

    app = FastAPI(title="Roblox Directory Tree", version=__version__, lifespan=lifespan)
    app.state.gateway = gateway

    # Studio's HttpService and the browser debug page come from other origins.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(SnapshotParseError)
    async def snapshot_error_handler(_request: Request, exc: SnapshotParseError) -> JSONResponse:
        logger.warning("Rejected snapshot: {}", exc)
        return JSONResponse(status_code=400, content={"error": "Invalid snapshot", "detail": str(exc)})

    @app.get("/ping")
    def ping() -> dict[str, str]:
        return {"status": "ok", "server": SERVER_NAME, "version": __version__}

    @app.post("/sync")
    async def sync(request: Request) -> dict[str, Any]:
        body = await request.body()
        await run_in_threadpool(gateway.publish, body)
        return {"status": "ok", "received": True}

    @app.get("/tree", response_model=None)
    def tree() -> JSONResponse:
        # Deep trees skip response validation and jsonable_encoder recursion.
        return JSONResponse(gateway.get_current().to_dict())

    @app.get("/tree/text", response_class=PlainTextResponse)
    def tree_text() -> str:
        return gateway.render_text()

    @app.get("/status", response_model=None)
    def status() -> dict[str, Any]:
        return gateway.get_connection_status().to_dict()

    @app.get("/search", response_model=None)
    def search(q: str = "") -> dict[str, Any] | JSONResponse:
        if not q:
            return JSONResponse(status_code=400, content={"error": "No search query provided."})
        results = gateway.search(q)
        return {"query": q, "count": len(results), "results": [r.to_dict() for r in results]}

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return DEBUG_PAGE

    return app


def run_http_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve the tree app with uvicorn until interrupted."""
    logger.info("Listening on http://{}:{}", host, port)
    # log_config=None keeps uvicorn on the handlers set up by configure_logging.
    uvicorn.run(create_app(), host=host, port=port, log_config=None)
