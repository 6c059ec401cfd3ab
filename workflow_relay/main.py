"""
Workflow Relay - Main application entry point.
"""
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .errors import RelayError
from .logger import logger, setup_logging
from .update import UpdateHandler
from .webhook import WebhookHandler, WorkflowSummary


# Both endpoints answer every method; the handlers decide what to do with it
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE", "CONNECT"]


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Deployment settings; read from the environment if omitted
        transport: Optional httpx transport for outbound GitHub calls

    Returns:
        Configured application
    """
    if settings is None:
        settings = Settings()

    setup_logging(settings.debug)

    update_handler = UpdateHandler(settings, transport=transport)
    webhook_handler = WebhookHandler(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Relays file updates to GitHub and workflow run results back",
        version=settings.app_version,
        # Paths match exactly; "/update/" is a 404, not a redirect
        redirect_slashes=False,
    )

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        """Render relay errors as JSON with their own status."""
        logger.warning(f"{request.method} {request.url.path} failed: {exc.code} ({exc.status_code})")
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Render routing errors (unknown paths) as JSON."""
        if exc.status_code == 404:
            return error_response("Not Found", 404)
        return error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        """Last resort for anything unexpected."""
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        return error_response(str(exc) or "Internal Error", 500)

    @app.api_route("/update", methods=ALL_METHODS)
    async def update(request: Request):
        """Replace the configured file with the posted content."""
        result = await update_handler.handle_update(request)
        return JSONResponse(result.model_dump(exclude_none=True))

    @app.api_route("/webhook", methods=ALL_METHODS)
    async def webhook(request: Request):
        """GitHub workflow run webhook endpoint."""
        outcome = await webhook_handler.handle_webhook(request)
        if isinstance(outcome, Response):
            return outcome
        if isinstance(outcome, WorkflowSummary):
            # Fields missing from the run stay missing
            return JSONResponse(outcome.model_dump(exclude_unset=True))
        return JSONResponse(outcome.model_dump())

    logger.info(f"Relaying {settings.github_owner}/{settings.github_repo}:{settings.file_path}@{settings.branch}")
    return app


if __name__ == "__main__":
    import uvicorn

    settings = Settings()

    uvicorn.run(
        "workflow_relay.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
