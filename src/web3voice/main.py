"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from web3voice.dependencies import close_clients, get_config
from web3voice.exceptions import (
    CacheServiceError,
    ConfigurationError,
    InputError,
    MintInProgressError,
    UpstreamError,
)
from web3voice.logging import setup_logging
from web3voice.response_models import ErrorResponse
from web3voice.routes import ai_router, health_router, ipfs_router, near_router

patch_all()

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close_clients()


app = FastAPI(title="Web3Voice Gateway", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().server.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health_router)
app.include_router(ipfs_router)
app.include_router(ai_router)
app.include_router(near_router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error["loc"] if part != "body")
    return f"{location}: {error['msg']}" if location else error["msg"]


@app.exception_handler(InputError)
async def handle_input_error(request: Request, exc: InputError) -> JSONResponse:
    return _error(400, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = "; ".join(_describe(error) for error in exc.errors())
    return _error(400, message or "Invalid request")


@app.exception_handler(MintInProgressError)
async def handle_mint_in_progress(
    request: Request, exc: MintInProgressError
) -> JSONResponse:
    return _error(409, str(exc))


@app.exception_handler(ConfigurationError)
async def handle_configuration_error(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    logger.error("Gateway misconfigured", extra={"missing": exc.missing})
    return _error(500, str(exc))


@app.exception_handler(UpstreamError)
async def handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    return _error(500, exc.message)


@app.exception_handler(CacheServiceError)
async def handle_cache_error(request: Request, exc: CacheServiceError) -> JSONResponse:
    return _error(500, str(exc))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return _error(500, str(exc) or type(exc).__name__)


def run() -> None:
    """Serves the gateway with Uvicorn."""
    uvicorn.run(app, host="0.0.0.0", port=get_config().server.port, log_config=None)


if __name__ == "__main__":
    run()
