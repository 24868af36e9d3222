"""FastAPI server for the training data viewer"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tdviewer.api.models import ErrorResponse
from tdviewer.api.routes.health import router as health_router
from tdviewer.api.routes.viewer import router as viewer_router
from tdviewer.config import API_HOST, API_PORT, APP_VERSION, SERVICE_NAME
from tdviewer.dataset.state import ViewerState
from tdviewer.observability.logging import get_logger
from tdviewer.observability.telemetry import counter

logger = get_logger(__name__)


def create_app(state: ViewerState | None = None) -> FastAPI:
    """
    Build the app around one ViewerState.

    Tests pass their own state; the module-level ``app`` gets a fresh one.
    """
    application = FastAPI(title=SERVICE_NAME, version=APP_VERSION)
    application.state.viewer = state if state is not None else ViewerState()

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.include_router(health_router)
    application.include_router(viewer_router)

    logger.info("%s %s ready", SERVICE_NAME, APP_VERSION)
    return application


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Validation error handler that reports field names only.

    Side Effects:
        - Logs detailed validation errors for debugging
        - Increments validation error counter
    """
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    counter("api.validation_errors")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            detail="Invalid request format. Please check your request and try again.",
            error_count=len(exc.errors()),
            invalid_fields=[str(err["loc"][-1]) for err in exc.errors()],
        ).model_dump(),
    )


app = create_app()


def main(host: str = API_HOST, port: int = API_PORT) -> None:
    import uvicorn

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
