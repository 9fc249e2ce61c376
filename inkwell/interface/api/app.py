"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inkwell.config import Settings
from inkwell.interface.api.routes import (
    admin_auth,
    admin_comments,
    admin_content,
    admin_links,
    admin_site,
    comments,
    gates,
    health,
    hooks,
    posts,
    site,
)
from inkwell.interface.error import register_error_handlers
from inkwell.util.di.container import create_container, setup_di
from inkwell.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Stops gate countdowns, finishes pending click counts and closes the
    # backend HTTP client
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, the production container when None
    """
    settings = Settings()

    # Instrument httpx for outbound calls to the hosted backend
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Inkwell API",
        description="Backend API for Inkwell - a blog with threaded comments, link gates and an admin console",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.site_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(site.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(gates.router)
    app_instance.include_router(hooks.router)
    app_instance.include_router(admin_auth.router)
    app_instance.include_router(admin_content.router)
    app_instance.include_router(admin_comments.router)
    app_instance.include_router(admin_links.router)
    app_instance.include_router(admin_site.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
