"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recipe_accounts.api.accounts import router as accounts_router
from recipe_accounts.api.favorites import router as favorites_router
from recipe_accounts.api.fridge import router as fridge_router
from recipe_accounts.api.preferences import router as preferences_router
from recipe_accounts.app_logging import configure_logging
from recipe_accounts.containers import AppContainer
from recipe_accounts.errors import AccountsError, AuthenticationError, InternalError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Recipe Accounts API")
    app.state.container = container

    app.include_router(accounts_router)
    app.include_router(fridge_router)
    app.include_router(preferences_router)
    app.include_router(favorites_router)

    @app.exception_handler(AccountsError)
    async def accounts_error_handler(
        request: Request, exc: AccountsError
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Request failed: %s %s", request.method, request.url.path)
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if isinstance(exc, AuthenticationError)
            else None
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400, content={"error": _describe_validation(exc)}
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error for %s %s", request.method, request.url.path
        )
        return JSONResponse(status_code=500, content={"error": InternalError.message})

    @app.get("/health")
    def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _describe_validation(exc: RequestValidationError) -> str:
    """Summarize request validation errors without echoing input values."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = str(error.get("msg", "invalid"))
        problems.append(f"{location}: {message}" if location else message)
    return "; ".join(problems) or "Invalid request"
