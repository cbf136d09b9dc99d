from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import INVALID_REQUEST, ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = exc.to_dict()
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code}: {error_dict}"
    )
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(
        f"{request.method} {request.url.path} failed with "
        f"{exc.base_error.code}: {exc.base_error.message}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.to_dict()},
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Malformed request bodies share the error envelope of the use case codes"""
    fields = ", ".join(
        ".".join(str(part) for part in error["loc"]) for error in exc.errors()
    )
    error_dict = {"code": INVALID_REQUEST, "message": f"Invalid request: {fields}"}
    logger.warning(f"{request.method} {request.url.path} -> 422: {error_dict}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": error_dict},
    )


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Community API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from community_api.api.routes import events, health_check, organizations, users

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(users.router, tags=["User"])
    app.include_router(organizations.router, tags=["Organization"])
    app.include_router(events.router, tags=["Event"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    return app
