"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .logging_config import get_logger
from .polls import PollRegistry
from .search import SearchEngine

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Create in-memory components."""
        ...

    async def stop(self) -> None:
        """Release components."""
        ...

    async def reset(self) -> None:
        """Drop in-memory data between test runs."""
        ...

    @property
    def search_engine(self) -> SearchEngine: ...

    @property
    def polls(self) -> PollRegistry: ...


class Application:
    """Holds the stateful components behind the API. Nothing is persisted."""

    def __init__(self):
        # Components (will be initialized in start())
        self._search_engine: SearchEngine | None = None
        self._polls: PollRegistry | None = None

    async def start(self) -> None:
        """Create components."""
        logger.info("Starting application")

        self._search_engine = SearchEngine()
        logger.info("Search engine initialized")

        self._polls = PollRegistry()
        logger.info("Poll registry initialized")

    async def stop(self) -> None:
        """Release components in reverse order."""
        if self._polls is not None:
            self._polls.clear()
            self._polls = None
        if self._search_engine is not None:
            self._search_engine.clear()
            self._search_engine = None
        logger.info("Application stopped")

    async def reset(self) -> None:
        """Clear the search index and all polls."""
        if self._search_engine is not None:
            self._search_engine.clear()
        if self._polls is not None:
            self._polls.clear()
        logger.info("Reset complete")

    @property
    def search_engine(self) -> SearchEngine:
        """Get search engine instance."""
        if self._search_engine is None:
            raise RuntimeError("Application not started")
        return self._search_engine

    @property
    def polls(self) -> PollRegistry:
        """Get poll registry instance."""
        if self._polls is None:
            raise RuntimeError("Application not started")
        return self._polls
