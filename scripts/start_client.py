#!/usr/bin/env python3
"""Open the Hoots client at a path, with Logfire tracking startup errors.

Usage:
    python scripts/start_client.py [path]
"""

import asyncio
import sys

import logfire

from hoot.config import Settings
from hoot.interface.app import create_client
from hoot.interface.navigation import NavigationController
from hoot.util.observability import configure_logfire


async def run(path: str) -> int:
    container = create_client()
    try:
        navigation = await container.get(NavigationController)

        error = await navigation.on_identity_changed()
        if error is not None:
            logfire.warn("Hoot list unavailable", error=str(error))

        decision = await navigation.navigate(path)
        logfire.info(
            "Opened",
            path=decision.path,
            allow=decision.allow,
            redirect_target=decision.redirect_target,
            error=decision.error,
            hoots=len(navigation.hoot_collection),
        )
        return 0 if decision.allow and decision.error is None else 1
    finally:
        await container.close()


def main() -> int:
    """Start the client and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    path = sys.argv[1] if len(sys.argv) > 1 else "/"
    try:
        logfire.info("Starting Hoots client", path=path)
        return asyncio.run(run(path))
    except Exception as e:
        logfire.error(
            "Client startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
