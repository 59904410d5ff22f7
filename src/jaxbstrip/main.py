# Author: Bradley R. Kinnard — because not every build runs maven

"""
HTTP face of the stripper. POST an ObjectFactory.java, get it back without the xjc timestamp.
The cli is the main entry; this is for pipelines that would rather not shell out.
run with: python -m src.jaxbstrip.main
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI, Request

from src.jaxbstrip.api.routes_health import router as health_router
from src.jaxbstrip.api.routes_strip import router as strip_router
from src.jaxbstrip.config import get_settings
from src.jaxbstrip.logging_config import set_run_id, setup_logging

log = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    s = get_settings()
    setup_logging(level=s.log_level)
    log.info(f"jaxbstrip {app.version} up | max_payload={s.max_payload_bytes}")
    yield
    log.info("jaxbstrip shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="jaxbstrip",
        description="Reproducible-build normalization for xjc ObjectFactory.java files",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def tag_request(request: Request, call_next):
        # caller's id wins so build logs and ours line up
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = rid
        set_run_id(rid)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(strip_router, prefix=API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("src.jaxbstrip.main:app", host="127.0.0.1", port=8000)
