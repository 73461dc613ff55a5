from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.db.session import shutdown
from app.dependencies import DB
from app.exceptions import DomainError, NotFoundError
from app.logging import get_logger
from app.middleware import REQUEST_ID_HEADER, RequestIDMiddleware
from app.routers.bird import router as bird_router
from app.schemas.error import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Nothing to warm up on startup; close pooled connections on shutdown."""
    yield
    await shutdown()


app = FastAPI(title="Birds API", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(bird_router)


def _error_json(message: str) -> dict[str, object]:
    """Build the standard error body as a dict for JSONResponse."""
    return ErrorResponse(error=message).model_dump()


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Return 404 for any lookup that raised, whichever endpoint it came from."""
    logger.info(
        "not_found",
        entity=exc.entity,
        identifier=exc.identifier,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(status_code=404, content=_error_json(exc.message))


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Return 400 for generic domain-level violations."""
    logger.warning("domain_error", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=400, content=_error_json(exc.message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a safe error response.

    The traceback goes to the log (with the bound request_id); the client
    only sees a generic message. This response is built outside
    RequestIDMiddleware, so the request id header is set here.
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    response = JSONResponse(status_code=500, content=_error_json("Internal server error"))
    request_id = structlog.contextvars.get_contextvars().get("request_id")
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Health check: 200 only if the database answers a ping query."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
