"""FastAPI application entry point for the Resume Maker API."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from resume_maker.api.errors import register_exception_handlers
from resume_maker.api.routes import health, resumes, templates
from resume_maker.config import get_api_version, get_port

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Response

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

app = FastAPI(
    title="Resume Maker API",
    description="API for rendering print-ready PDF resumes",
    version=get_api_version(),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(health.router, prefix=API_PREFIX)
app.include_router(templates.router, prefix=API_PREFIX)
app.include_router(resumes.router, prefix=API_PREFIX)


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "resume_maker.api.main:app",
        host="0.0.0.0",
        port=get_port(),
        reload=True,
    )


if __name__ == "__main__":
    main()
