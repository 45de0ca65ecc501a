"""Entry point for the listing server."""

import time
import uuid

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from common.logging_config import setup_logging
from dirlist.config import SERVER_HOST, SERVER_PORT
from dirlist.database import init_database
from dirlist.exceptions import (
    DirListException,
    EnumerationIOError,
    NotADirectory,
    PathNotFound,
    RegistryNameNotFound
)
from dirlist.routes.directory_routes import router as directory_router
from dirlist.routes.entry_routes import router as entry_router
from dirlist.schemas.common import ErrorResponse

logger = setup_logging('dirlist')

app = FastAPI(
    title="dirlist",
    description="Lists the entries of registry-named and path-addressed directories",
    version="1.0.0"
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log all HTTP requests and responses.
    """
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    logger.info(
        f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
    )

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
    )

    response.headers["X-Request-ID"] = request_id

    return response


@app.on_event("startup")
async def startup_event():
    """
    Initialize the registry database on application startup.
    """
    logger.info("Listing service starting up...")
    init_database()
    logger.info("Registry database initialized")


def _error_response(request: Request, exc: Exception, status_code: int, code: str) -> JSONResponse:
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.warning(
        f"{type(exc).__name__}: {exc} [request_id={request_id}] path={request.url.path}"
    )
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(detail=str(exc), code=code).model_dump()
    )


@app.exception_handler(RegistryNameNotFound)
async def registry_name_not_found_handler(request: Request, exc: RegistryNameNotFound):
    return _error_response(request, exc, status.HTTP_404_NOT_FOUND, "REGISTRY_NAME_NOT_FOUND")


@app.exception_handler(PathNotFound)
async def path_not_found_handler(request: Request, exc: PathNotFound):
    return _error_response(request, exc, status.HTTP_404_NOT_FOUND, "PATH_NOT_FOUND")


@app.exception_handler(NotADirectory)
async def not_a_directory_handler(request: Request, exc: NotADirectory):
    return _error_response(request, exc, status.HTTP_400_BAD_REQUEST, "NOT_A_DIRECTORY")


@app.exception_handler(EnumerationIOError)
async def enumeration_io_error_handler(request: Request, exc: EnumerationIOError):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(
        f"Enumeration I/O error: {exc} [request_id={request_id}] path={request.url.path}",
        exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail=str(exc), code="ENUMERATION_IO_ERROR").model_dump()
    )


@app.exception_handler(DirListException)
async def dirlist_exception_handler(request: Request, exc: DirListException):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(
        f"Listing exception: {exc} [request_id={request_id}] path={request.url.path}",
        exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail=str(exc), code="INTERNAL_ERROR").model_dump()
    )


app.include_router(directory_router)
app.include_router(entry_router)


@app.get("/")
async def root():
    """
    Root endpoint for health check.
    """
    return {"message": "dirlist API", "status": "running"}


@app.get("/health")
async def health_check():
    """
    Health check endpoint for Docker healthcheck.
    Returns 200 if service is alive.
    """
    return {"status": "healthy", "service": "dirlist"}


@app.get("/ready")
def ready_check():
    """
    Readiness check endpoint.
    Verifies the registry database can be queried.
    """
    from dirlist.database import get_db_connection

    try:
        with get_db_connection() as conn:
            conn.execute("SELECT 1 FROM directories LIMIT 1")
        db_status = "ok"
    except Exception as e:
        db_status = f"error: {str(e)}"

    ready = db_status == "ok"
    status_code = status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        status_code=status_code,
        content={"ready": ready, "database": db_status}
    )


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "dirlist.main:app",
        host=SERVER_HOST,
        port=SERVER_PORT
    )


if __name__ == "__main__":
    main()
