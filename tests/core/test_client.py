"""
Tests for client construction, table queries and database functions.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import BaseModel, ValidationError
from supabase import AsyncClientOptions, ClientOptions

from supakit.client import (
    create,
    create_async,
    create_default,
    create_from_settings,
    execute,
    from_,
    initialize,
    rows,
    rpc,
    rpc_typed,
)
from supakit.models import TableModel
from supakit.options import ClientConfig, OptionsBuilder


def make_response(data=None, count=None):
    return SimpleNamespace(data=data, count=count)


class Item(TableModel):
    __table_name__ = "test_items"

    id: int | None = None
    name: str
    value: int = 0
    is_active: bool = False


class Unbound(TableModel):
    name: str


class Total(BaseModel):
    total: int


class TestCreate:

    def test_create_renders_config(self):
        config = OptionsBuilder().schema("app").build()
        with patch("supakit.client.create_client") as create_client:
            client = create("http://localhost:54321", "key", config)

        url, key, options = create_client.call_args.args
        assert (url, key) == ("http://localhost:54321", "key")
        assert isinstance(options, ClientOptions)
        assert options.schema == "app"
        assert client is create_client.return_value

    def test_create_passes_sdk_options_through(self):
        options = ClientOptions(schema="app")
        with patch("supakit.client.create_client") as create_client:
            create("http://localhost:54321", "key", options)
        assert create_client.call_args.args[2] is options

    def test_create_default_uses_sdk_defaults(self):
        with patch("supakit.client.create_client") as create_client:
            create_default("http://localhost:54321", "key")
        create_client.assert_called_once_with("http://localhost:54321", "key", None)

    @pytest.mark.asyncio
    async def test_create_async_renders_async_options(self):
        with patch("supakit.client.acreate_client", new=AsyncMock()) as acreate_client:
            client = await create_async("http://localhost:54321", "key", ClientConfig())

        assert isinstance(acreate_client.call_args.args[2], AsyncClientOptions)
        assert client is acreate_client.return_value


class TestCreateFromSettings:

    @pytest.mark.asyncio
    async def test_missing_settings_raise(self, empty_settings):
        with pytest.raises(ValueError, match="SUPABASE_URL, SUPABASE_KEY"):
            await create_from_settings(empty_settings)

    @pytest.mark.asyncio
    async def test_sync_client_from_settings(self, project_settings):
        with patch("supakit.client.create_client") as create_client:
            await create_from_settings(project_settings)

        url, key, options = create_client.call_args.args
        assert url == "http://localhost:54321"
        assert key == "anon-key"
        assert options.schema == "app"

    @pytest.mark.asyncio
    async def test_async_client_from_settings(self, project_settings):
        with patch("supakit.client.acreate_client", new=AsyncMock()) as acreate_client:
            await create_from_settings(project_settings, use_async=True)
        assert isinstance(acreate_client.call_args.args[2], AsyncClientOptions)


class TestInitialize:

    @pytest.mark.asyncio
    async def test_restores_session(self, mock_async_supabase):
        client = await initialize(mock_async_supabase)

        assert client is mock_async_supabase
        mock_async_supabase.auth.get_session.assert_awaited_once()
        mock_async_supabase.realtime.connect.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_connects_realtime_when_configured(self, mock_async_supabase):
        config = OptionsBuilder().auto_connect_realtime(True).build()
        await initialize(mock_async_supabase, config)
        mock_async_supabase.realtime.connect.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_sync_client(self, mock_supabase):
        assert await initialize(mock_supabase) is mock_supabase
        mock_supabase.auth.get_session.assert_called_once()


class TestTables:

    def test_from_table_name(self, mock_supabase):
        builder = from_(mock_supabase, "movies")
        mock_supabase.table.assert_called_once_with("movies")
        assert builder is mock_supabase.table.return_value

    def test_from_model(self, mock_supabase):
        from_(mock_supabase, Item)
        mock_supabase.table.assert_called_once_with("test_items")

    def test_model_without_table_name(self, mock_supabase):
        with pytest.raises(TypeError):
            from_(mock_supabase, Unbound)

    @pytest.mark.asyncio
    async def test_execute_sync_query(self, mock_supabase):
        mock_supabase.table.return_value.execute.return_value = make_response([{"id": 1}])
        response = await execute(from_(mock_supabase, "movies").select("*"))
        assert response.data == [{"id": 1}]

    @pytest.mark.asyncio
    async def test_execute_async_query(self, mock_async_supabase):
        mock_async_supabase.table.return_value.execute.return_value = make_response([{"id": 2}])
        response = await execute(from_(mock_async_supabase, "movies").select("*"))
        assert response.data == [{"id": 2}]

    @pytest.mark.asyncio
    async def test_execute_propagates_errors(self, mock_supabase):
        mock_supabase.table.return_value.execute.side_effect = PermissionError("rls")
        with pytest.raises(PermissionError):
            await execute(from_(mock_supabase, "movies").select("*"))


class TestRows:

    def test_list(self):
        items = rows(make_response([{"id": 1, "name": "a"}, {"id": 2, "name": "b", "value": 3}]), Item)
        assert [i.id for i in items] == [1, 2]
        assert items[1].value == 3

    def test_single_row(self):
        assert rows(make_response({"id": 1, "name": "a"}), Item)[0].name == "a"

    def test_empty(self):
        assert rows(make_response(None), Item) == []

    def test_unknown_columns_ignored(self):
        item = rows(make_response([{"id": 1, "name": "a", "created_at": "2025-01-01"}]), Item)[0]
        assert not hasattr(item, "created_at")

    def test_invalid_row(self):
        with pytest.raises(ValidationError):
            rows(make_response([{"id": 1}]), Item)

    def test_to_row_leaves_out_unset(self):
        assert Item(name="a").to_row(exclude={"id"}) == {"name": "a", "value": 0, "is_active": False}


class TestRpc:

    @pytest.mark.asyncio
    async def test_rpc_forwards(self, mock_async_supabase):
        mock_async_supabase.rpc.return_value.execute.return_value = make_response("hi")

        response = await rpc(mock_async_supabase, "hello_world", {"name": "Ada"})

        mock_async_supabase.rpc.assert_called_once_with("hello_world", {"name": "Ada"})
        assert response.data == "hi"

    @pytest.mark.asyncio
    async def test_rpc_default_params(self, mock_supabase):
        await rpc(mock_supabase, "now")
        mock_supabase.rpc.assert_called_once_with("now", {})

    @pytest.mark.asyncio
    async def test_rpc_typed_model(self, mock_supabase):
        mock_supabase.rpc.return_value.execute.return_value = make_response({"total": 4})
        assert await rpc_typed(mock_supabase, "totals", Total) == Total(total=4)

    @pytest.mark.asyncio
    async def test_rpc_typed_list(self, mock_supabase):
        mock_supabase.rpc.return_value.execute.return_value = make_response([{"id": 1, "name": "a"}])
        items = await rpc_typed(mock_supabase, "active_items", list[Item])
        assert items == [Item(id=1, name="a")]

    @pytest.mark.asyncio
    async def test_rpc_typed_scalar(self, mock_supabase):
        mock_supabase.rpc.return_value.execute.return_value = make_response(7)
        assert await rpc_typed(mock_supabase, "count_items", int) == 7

    @pytest.mark.asyncio
    async def test_rpc_typed_invalid(self, mock_supabase):
        mock_supabase.rpc.return_value.execute.return_value = make_response({"total": "many"})
        with pytest.raises(ValidationError):
            await rpc_typed(mock_supabase, "totals", Total)
