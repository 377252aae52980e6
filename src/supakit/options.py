"""
supakit - Client Options Builder.

Accumulates client configuration and renders supabase-py's ClientOptions:

    config = (
        OptionsBuilder()
        .schema("public")
        .auto_refresh_token(True)
        .auto_connect_realtime(False)
        .header("x-app", "contacts")
        .build()
    )
    client = supakit.client.create(url, key, config)

Or in one call: supabase_options(schema_name="public", auto_refresh_token=True).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from supabase import AsyncClientOptions, ClientOptions


class ClientConfig(BaseModel):
    """
    Everything needed to construct a Supabase client.

    Optional fields left as None keep supabase-py's own defaults.
    auto_connect_realtime is not a supabase-py option; it is read by
    supakit.client.initialize().
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    schema_name: str = "public"
    headers: dict[str, str] = Field(default_factory=dict)
    auto_refresh_token: bool = True
    persist_session: bool = True
    auto_connect_realtime: bool = False
    storage: Any | None = None  # gotrue session persistence
    realtime: dict[str, Any] | None = None
    postgrest_client_timeout: float | None = None
    storage_client_timeout: float | None = None
    function_client_timeout: float | None = None
    flow_type: Literal["pkce", "implicit"] = "pkce"

    def to_client_options(self, use_async: bool = False) -> ClientOptions | AsyncClientOptions:
        """Render as supabase-py ClientOptions (AsyncClientOptions when use_async)."""
        options_cls = AsyncClientOptions if use_async else ClientOptions

        kwargs: dict[str, Any] = {
            "schema": self.schema_name,
            "auto_refresh_token": self.auto_refresh_token,
            "persist_session": self.persist_session,
            "flow_type": self.flow_type,
        }

        # Keep the SDK's X-Client-Info header; ours win on conflict
        if self.headers:
            kwargs["headers"] = {**options_cls().headers, **self.headers}

        for name in (
            "storage",
            "realtime",
            "postgrest_client_timeout",
            "storage_client_timeout",
            "function_client_timeout",
        ):
            value = getattr(self, name)
            if value is not None:
                kwargs[name] = value

        return options_cls(**kwargs)


class OptionsBuilder:
    """Fluent accumulator for ClientConfig. Each setter returns the builder."""

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._headers: dict[str, str] = {}

    def schema(self, schema: str) -> "OptionsBuilder":
        """Database schema for table queries."""
        self._fields["schema_name"] = schema
        return self

    def auto_refresh_token(self, enabled: bool) -> "OptionsBuilder":
        self._fields["auto_refresh_token"] = enabled
        return self

    def persist_session(self, enabled: bool) -> "OptionsBuilder":
        self._fields["persist_session"] = enabled
        return self

    def auto_connect_realtime(self, enabled: bool) -> "OptionsBuilder":
        """Connect realtime during supakit.client.initialize()."""
        self._fields["auto_connect_realtime"] = enabled
        return self

    def session_handler(self, storage: Any) -> "OptionsBuilder":
        """Session persistence storage (a gotrue SyncSupportedStorage or AsyncSupportedStorage)."""
        self._fields["storage"] = storage
        return self

    def header(self, key: str, value: str) -> "OptionsBuilder":
        """Add a request header. A repeated key replaces the earlier value."""
        self._headers[key] = value
        return self

    def realtime_options(self, **options: Any) -> "OptionsBuilder":
        """Options passed through to the realtime client (auto_reconnect, hb_interval, ...)."""
        self._fields["realtime"] = options
        return self

    def timeouts(
        self,
        postgrest: float | None = None,
        storage: float | None = None,
        functions: float | None = None,
    ) -> "OptionsBuilder":
        """Per-service HTTP timeouts in seconds. None keeps the SDK default."""
        self._fields["postgrest_client_timeout"] = postgrest
        self._fields["storage_client_timeout"] = storage
        self._fields["function_client_timeout"] = functions
        return self

    def flow_type(self, flow_type: Literal["pkce", "implicit"]) -> "OptionsBuilder":
        self._fields["flow_type"] = flow_type
        return self

    def build(self) -> ClientConfig:
        return ClientConfig(headers=dict(self._headers), **self._fields)


def supabase_options(**fields: Any) -> ClientConfig:
    """Build a ClientConfig from keyword arguments."""
    return ClientConfig(**fields)
