from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from opensearchpy import OpenSearch

from .settings import settings
from .api.routes import router as api_router
from .services.search_service import create_client, ping

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

if settings.os_log_requests:
    # opensearch-py logs each request and response on these loggers
    logging.getLogger("opensearch").setLevel(logging.DEBUG)
    logging.getLogger("opensearch.trace").setLevel(logging.DEBUG)

logger = logging.getLogger("keyword_trends")


def create_app(client: OpenSearch | None = None) -> FastAPI:
    app = FastAPI(title="Keyword Trends", debug=settings.app_env != "production")
    app.state.search_client = client if client is not None else create_client(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %s in %.0fms", request.method, request.url.path, response.status_code, duration)
        return response

    @app.on_event("startup")
    async def _startup_check():
        if not ping(app.state.search_client):
            # Hard fail if OpenSearch is not reachable
            raise RuntimeError("OpenSearch is not reachable at startup. Check OPENSEARCH_* settings and service status.")

    @app.on_event("shutdown")
    async def _close_client():
        app.state.search_client.close()

    app.include_router(api_router)
    return app


app = create_app()
