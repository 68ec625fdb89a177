"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from ..config import Settings
from ..logging_config import get_logger
from .routes import chats, control, events, polls, search

logger = get_logger(__name__)

# Global application instance
_app: Application | None = None


def get_app() -> Application:
    """Get the global application instance."""
    global _app
    if not _app:
        _app = Application()
    return _app


def create_fastapi_app(
    application: Application | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application or get_app()
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="calchat API",
        description="Chat and calendar helpers",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(chats.create_chats_router())
    fastapi_app.include_router(events.create_events_router())
    fastapi_app.include_router(search.create_search_router(application))
    fastapi_app.include_router(polls.create_polls_router(application))
    fastapi_app.include_router(control.create_control_router(application))

    logger.info(f"FastAPI app created with origins {settings.cors_origins}")
    return fastapi_app
