"""Domain error to HTTP response mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from agora.domain.error import AuthError, ConflictError, StoreError, ValidationError


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers that turn domain errors into HTTP responses.

    Handlers run inside the request scope, so the request session still
    commits afterwards. Domain errors are raised before any write, or after
    the failed write was rolled back to its savepoint.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(
        request: Request, exc: ConflictError
    ) -> JSONResponse:
        logfire.warn("Write conflict", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "The vote changed while it was being saved, try again"},
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        # Store internals are logged by the repository; never expose them
        logfire.error("Store unavailable", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Service temporarily unavailable"},
        )
