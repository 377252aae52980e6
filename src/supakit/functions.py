"""
supakit - Edge Function Wrappers.

supafunc returns the raw response body (bytes) unless invoked with
responseType "json". The typed variants accept either and validate the
decoded payload with pydantic.
"""

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter

from supakit.aio import call

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _invoke_options(body: Any, headers: dict[str, str] | None) -> dict[str, Any]:
    options: dict[str, Any] = {"body": body}
    if headers:
        options["headers"] = headers
    return options


def _decode(payload: Any, model: type[T] | Any) -> T:
    adapter = TypeAdapter(model)
    if isinstance(payload, (bytes, bytearray, str)):
        return adapter.validate_json(payload)
    return adapter.validate_python(payload)


async def invoke(client: Any, name: str) -> Any:
    """Invoke an edge function with no body."""
    logger.debug(f"Invoking edge function {name}")
    return await call(client.functions.invoke, name)


async def invoke_with(
    client: Any,
    name: str,
    body: Any,
    headers: dict[str, str] | None = None,
) -> Any:
    """Invoke an edge function with a body (dict/list are sent as JSON) and optional headers."""
    logger.debug(f"Invoking edge function {name}")
    return await call(client.functions.invoke, name, _invoke_options(body, headers))


async def invoke_typed(client: Any, name: str, model: type[T] | Any) -> T:
    """Invoke an edge function and validate its JSON response as `model`."""
    return _decode(await invoke(client, name), model)


async def invoke_typed_with(
    client: Any,
    name: str,
    model: type[T] | Any,
    body: Any,
    headers: dict[str, str] | None = None,
) -> T:
    return _decode(await invoke_with(client, name, body, headers), model)
