"""FastAPI application entrypoint. No business logic; only wiring, middleware and error translation."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from userauth.api.routes import router as api_router
from userauth.core.config import settings
from userauth.core.errors import AuthenticationError, AuthServiceError, StoreError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal server error"

app = FastAPI(
    title="userauth API",
    version="0.1.0",
    docs_url="/docs" if settings.APP_ENV == "dev" else None,
    redoc_url="/redoc" if settings.APP_ENV == "dev" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthServiceError)
async def handle_auth_service_error(request: Request, exc: AuthServiceError) -> JSONResponse:
    """Translate service errors to {"error": message}; store failures stay generic."""
    if isinstance(exc, StoreError):
        logger.error(
            "Store error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc.cause or exc,
        )
        return JSONResponse(status_code=exc.status_code, content={"error": GENERIC_SERVER_ERROR})
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed JSON or wrongly typed fields: 400 with the same error shape."""
    logger.info(
        "Rejected request body on %s %s",
        request.method,
        request.url.path,
        extra={"error_count": len(exc.errors())},
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": GENERIC_SERVER_ERROR})


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "userauth API"}
