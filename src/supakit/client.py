"""
supakit - Client Wrappers.

Creating clients, running table queries and calling database functions.
Every function takes the client first and forwards to supabase-py; both
Client and AsyncClient are accepted wherever a client is taken.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from supabase import AsyncClient, AsyncClientOptions, Client, ClientOptions, acreate_client, create_client

from supakit import realtime
from supakit.aio import call
from supakit.config import SupakitSettings, get_settings
from supakit.models import TableModel
from supakit.options import ClientConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

SupabaseClient = Client | AsyncClient


def _sdk_options(
    options: ClientConfig | ClientOptions | AsyncClientOptions | None,
    use_async: bool,
) -> ClientOptions | AsyncClientOptions | None:
    if isinstance(options, ClientConfig):
        return options.to_client_options(use_async=use_async)
    return options


# =============================================================================
# Construction
# =============================================================================


def create(
    url: str,
    key: str,
    options: ClientConfig | ClientOptions | None = None,
) -> Client:
    """Create a synchronous Supabase client."""
    logger.debug(f"Creating Supabase client for {url}")
    return create_client(url, key, _sdk_options(options, use_async=False))


def create_default(url: str, key: str) -> Client:
    """Create a synchronous Supabase client with supabase-py's defaults."""
    return create(url, key)


async def create_async(
    url: str,
    key: str,
    options: ClientConfig | AsyncClientOptions | None = None,
) -> AsyncClient:
    """Create an asyncio Supabase client."""
    logger.debug(f"Creating async Supabase client for {url}")
    return await acreate_client(url, key, _sdk_options(options, use_async=True))


async def create_from_settings(
    settings: SupakitSettings | None = None,
    use_async: bool = False,
) -> SupabaseClient:
    """
    Create a client from SupakitSettings (environment / .env by default).

    Raises:
        ValueError: SUPABASE_URL or SUPABASE_KEY is not set
    """
    settings = settings or get_settings()

    missing = settings.validate_required()
    if missing:
        raise ValueError(f"Missing Supabase configuration: {', '.join(missing)}")

    config = settings.to_client_config()
    if use_async:
        return await create_async(settings.supabase_url, settings.supabase_key, config)
    return create(settings.supabase_url, settings.supabase_key, config)


async def initialize(client: SupabaseClient, config: ClientConfig | None = None) -> SupabaseClient:
    """
    Restore the persisted session and, if configured, connect realtime.

    Returns the same client so calls can be chained:
        client = await initialize(create(url, key, config), config)
    """
    await call(client.auth.get_session)

    if config is not None and config.auto_connect_realtime:
        await realtime.connect(client)

    return client


# =============================================================================
# Tables
# =============================================================================


def from_(client: SupabaseClient, table: str | type[TableModel]) -> Any:
    """
    Query builder for a table, by name or by TableModel subclass.

    Example:
        query = from_(client, Movie).select("*").eq("id", 1)
        response = await execute(query)
    """
    name = table.table_name() if isinstance(table, type) else table
    return client.table(name)


async def execute(query: Any) -> Any:
    """Run a built query and return the SDK's APIResponse."""
    return await call(query.execute)


def rows(response: Any, model: type[M]) -> list[M]:
    """Validate response rows into `model` instances."""
    data = response.data or []
    if isinstance(data, dict):
        data = [data]
    return [model.model_validate(row) for row in data]


# =============================================================================
# Database functions
# =============================================================================


async def rpc(client: SupabaseClient, name: str, params: dict[str, Any] | None = None) -> Any:
    """Call a database function and return the SDK's APIResponse."""
    logger.debug(f"RPC {name}")
    return await call(client.rpc(name, params or {}).execute)


async def rpc_typed(
    client: SupabaseClient,
    name: str,
    model: type[T] | Any,
    params: dict[str, Any] | None = None,
) -> T:
    """
    Call a database function and validate its result as `model`.

    `model` is anything pydantic's TypeAdapter accepts: a BaseModel
    subclass, list[Movie], int, dict[str, float], ...
    """
    response = await rpc(client, name, params)
    return TypeAdapter(model).validate_python(response.data)
