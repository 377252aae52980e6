"""
Pytest configuration and fixtures for supakit tests.

Two client fixtures mirror supabase-py's two flavours:
- mock_supabase: sync Client, every SDK call is a plain MagicMock
- mock_async_supabase: AsyncClient, awaited SDK calls are AsyncMocks
"""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment before importing supakit modules
os.environ["SUPAKIT_ENV"] = "development"


def make_response(data=None, count=None):
    """Stand-in for postgrest's APIResponse."""
    return SimpleNamespace(data=data if data is not None else [], count=count)


def make_query_builder(response=None):
    """Chainable PostgREST builder; every filter/modifier returns the builder."""
    builder = MagicMock()
    for method in (
        "select", "insert", "update", "upsert", "delete",
        "eq", "neq", "in_", "order", "range", "limit", "single", "maybe_single",
    ):
        getattr(builder, method).return_value = builder
    builder.execute.return_value = response or make_response()
    return builder


@pytest.fixture
def mock_supabase():
    """Mock sync Supabase Client for unit tests."""
    mock_client = MagicMock()

    mock_table = make_query_builder()
    mock_client.table.return_value = mock_table
    mock_client.rpc.return_value = make_query_builder()

    mock_client.auth.get_session.return_value = None

    return mock_client


@pytest.fixture
def mock_async_supabase():
    """Mock AsyncClient for unit tests."""
    mock_client = MagicMock()

    mock_table = make_query_builder()
    mock_table.execute = AsyncMock(return_value=make_response())
    mock_client.table.return_value = mock_table

    mock_rpc = make_query_builder()
    mock_rpc.execute = AsyncMock(return_value=make_response())
    mock_client.rpc.return_value = mock_rpc

    # Auth
    for method in (
        "sign_in_with_password", "sign_up", "sign_out", "refresh_session",
        "reset_password_for_email", "update_user",
    ):
        setattr(mock_client.auth, method, AsyncMock())
    mock_client.auth.get_session = AsyncMock(return_value=None)

    # Realtime
    mock_client.realtime.connect = AsyncMock()
    mock_client.realtime.close = AsyncMock()
    mock_client.realtime.set_auth = AsyncMock()

    # Storage
    mock_bucket = MagicMock()
    for method in ("upload", "download", "remove", "list", "get_public_url"):
        setattr(mock_bucket, method, AsyncMock())
    mock_client.storage.from_.return_value = mock_bucket

    # Functions
    mock_client.functions.invoke = AsyncMock(return_value=b"")

    return mock_client


@pytest.fixture
def sample_session():
    """A gotrue-shaped session with a signed-in user."""
    user = SimpleNamespace(
        id="00000000-0000-0000-0000-000000000001",
        email="ada@example.com",
        phone=None,
    )
    return SimpleNamespace(
        access_token="access-token",
        refresh_token="refresh-token",
        user=user,
    )


@pytest.fixture
def sample_contact_rows():
    """Rows of the contacts table."""
    return [
        {"id": 1, "first": "Ada", "last": "Lovelace", "phone": "555-0100", "email": "ada@example.com"},
        {"id": 2, "first": "Alan", "last": "Turing", "phone": "555-0101", "email": "alan@example.com"},
        {"id": 3, "first": "Grace", "last": "Hopper", "phone": "555-0102", "email": "grace@example.com"},
    ]
