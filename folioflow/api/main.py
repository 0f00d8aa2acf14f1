"""FastAPI application entry point for the FolioFlow API."""

import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from folioflow.api.logger import _log_error, _log_info, _log_warning, setup_api_logger
from folioflow.api.routes import health, resumes
from folioflow.exceptions import (
    ExtractionError,
    LLMConfigurationError,
    UpstreamError,
    ValidationError,
)

load_dotenv()

API_PREFIX = "/api"
NOT_FOUND_MESSAGE = "API endpoint not found"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    log_file = setup_api_logger()
    _log_info(f"Logging to {log_file}")
    yield


app = FastAPI(
    title="FolioFlow API",
    description="Resume PDF extraction and language-model parsing for portfolio generation",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Error Mapping
# ============================================================================


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    _log_warning(f"{request.url.path}: rejected input ({exc.message})")
    return _error(400, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    detail = errors[0].get("msg", "invalid value") if errors else "invalid value"
    _log_warning(f"{request.url.path}: malformed request ({detail})")
    return _error(400, f"Invalid request: {detail}")


@app.exception_handler(ExtractionError)
async def handle_extraction_error(request: Request, exc: ExtractionError) -> JSONResponse:
    return _error(422, exc.message)


@app.exception_handler(UpstreamError)
async def handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    _log_error(f"{request.url.path}: upstream failure [{exc.status_code}] {exc.message}")
    return _error(exc.status_code, exc.message)


@app.exception_handler(LLMConfigurationError)
async def handle_configuration_error(request: Request, exc: LLMConfigurationError) -> JSONResponse:
    _log_error(str(exc))
    return _error(500, str(exc))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.url.path}")
    return _error(500, f"Internal server error: {exc}")


# ============================================================================
# Routes
# ============================================================================

app.include_router(health.router, prefix=API_PREFIX)
app.include_router(resumes.router, prefix=API_PREFIX)


@app.api_route(
    API_PREFIX + "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def api_not_found(path: str) -> JSONResponse:
    """Unknown API paths get a JSON 404 instead of an HTML page."""
    return _error(404, NOT_FOUND_MESSAGE)


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "folioflow.api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3001")),
        reload=False,
    )


if __name__ == "__main__":
    main()
