"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers, change
publisher. No business logic here (SRP). See codelists.core.lifespan and
codelists.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codelists.api.v1.router import api_router
from codelists.application.services.change_publisher import (
    CodelistChangePublisher,
    log_change_event,
)
from codelists.core.config import get_settings
from codelists.core.exception_handlers import register_exception_handlers
from codelists.core.lifespan import create_lifespan
from codelists.middleware import RequestIDMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    publisher = CodelistChangePublisher()
    publisher.subscribe(log_change_event)
    app.state.change_publisher = publisher

    register_exception_handlers(app)

    # Middleware: last added = outermost. Request ID wraps CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    def root() -> dict[str, str]:
        """Service name, version and where the API docs live."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app


app = create_app()
