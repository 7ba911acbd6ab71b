"""Client application bootstrap."""

from dishka import AsyncContainer

from hoot.config import Settings
from hoot.util.di.container import create_container
from hoot.util.logging import setup_logging
from hoot.util.observability import instrument_httpx


def create_client() -> AsyncContainer:
    """Create the client's DI container.

    Note: Logfire should be configured before calling this function.
    scripts/start_client.py handles this.
    """
    settings = Settings()
    setup_logging(settings)

    # Trace calls to the Hoots backend
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    return create_container()
