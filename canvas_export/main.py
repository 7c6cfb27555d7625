"""
Canvas export service.

POST a canvas model, get back the documents of an Android project.
"""
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from canvas_export.api.v1 import export_router, health_router
from canvas_export.config import settings
from canvas_export.core.logger import setup_logging
from canvas_export.services.exporter import ExportError, ExportFailedError, InvalidProjectError
from canvas_export.utils.logging import get_logger, log_context

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(
        "app.startup.completed",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "project_store": settings.project_store_backend,
            "escape_values": settings.export_escape_values,
        }
    )
    yield
    logger.info("app.shutdown.completed")


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description="Exports drag-and-drop canvas models as buildable Android projects",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# MIDDLEWARE
# ============================================================================

@app.middleware("http")
async def correlation_middleware(request: Request, call_next):
    """Scope every log event of a request to one correlation id"""
    correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
    started = time.perf_counter()

    with log_context(correlation_id=correlation_id, method=request.method,
                     path=request.url.path):
        logger.info("http.request.received")
        response = await call_next(request)
        logger.performance(
            "http.request.completed",
            duration_ms=(time.perf_counter() - started) * 1000,
            extra={"status_code": response.status_code}
        )

    response.headers[CORRELATION_HEADER] = correlation_id
    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================

@app.exception_handler(InvalidProjectError)
async def invalid_project_handler(request: Request, exc: InvalidProjectError):
    logger.warning("api.export.invalid_project", extra={"detail": exc.message})
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.exception_handler(ExportError)
async def export_error_handler(request: Request, exc: ExportError):
    """Any other export error is reported as a generic failure"""
    logger.error(
        "api.export.failed",
        extra={"reason": exc.reason},
        exc_info=exc.__cause__ or exc
    )
    return JSONResponse(
        status_code=500,
        content=ExportFailedError("Failed to export project").to_dict()
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "app.exception.unhandled",
        extra={"exception_type": type(exc).__name__},
        exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
        }
    )


# ============================================================================
# ROUTES
# ============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(export_router, prefix="/api/v1", tags=["Export"])


@app.get("/")
async def root():
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
        "api": {
            "export": "POST /api/v1/export",
            "export_stored": "POST /api/v1/projects/{project_id}/export",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "canvas_export.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
