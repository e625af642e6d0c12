"""FastAPI application factory for the newsletter service."""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.adapters.api import api_router
from src.core.config.settings import settings
from src.core.handlers import register_exception_handlers
from src.core.lifecycle import create_lifespan_manager
from src.core.middleware import configure_middleware

DESCRIPTION = (
    "Newsletter subscriptions with double opt-in: `POST /subscriptions` emails a "
    "confirmation link, `GET /subscriptions/confirm` activates the subscriber."
)


def create_application() -> FastAPI:
    """Build the app with middleware, exception handlers and routes attached.

    OpenAPI docs are served everywhere except production.
    """
    docs_enabled = settings.APP_ENV != "production"
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=DESCRIPTION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=create_lifespan_manager(),
        default_response_class=JSONResponse,
    )

    configure_middleware(app)
    register_exception_handlers(app)
    app.include_router(api_router)

    return app
