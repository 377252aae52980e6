"""
supakit - Realtime Wrappers.

supabase-py only implements realtime on AsyncClient; with a sync Client the
SDK's own NotImplementedError comes through unchanged.
"""

import logging
from typing import Any

from supakit.aio import call

logger = logging.getLogger(__name__)


async def connect(client: Any) -> None:
    """Open the realtime socket."""
    logger.debug("Connecting realtime")
    await call(client.realtime.connect)


async def disconnect(client: Any) -> None:
    """Close the realtime socket."""
    logger.debug("Disconnecting realtime")
    await call(client.realtime.close)


async def set_auth(client: Any, token: str | None) -> None:
    """Send a new access token to realtime and its joined channels."""
    await call(client.realtime.set_auth, token)


def channel(client: Any, name: str, params: dict[str, Any] | None = None) -> Any:
    """Get the channel for a topic, e.g. "public:movies". Subscribing is left to the caller."""
    return client.channel(name, params or {})
