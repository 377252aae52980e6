"""
Core test fixtures: isolated settings for the supakit package.

Settings are built without reading any .env file so that a developer's
local project credentials never leak into the unit tests.
"""

import pytest

from supakit.config import SupakitSettings, get_settings


@pytest.fixture
def empty_settings():
    """Settings with no Supabase project configured."""
    return SupakitSettings(_env_file=None, supabase_url="", supabase_key="")


@pytest.fixture
def project_settings():
    """Settings for a local Supabase project."""
    return SupakitSettings(
        _env_file=None,
        supabase_url="http://localhost:54321",
        supabase_key="anon-key",
        supabase_schema="app",
        supabase_auto_connect_realtime=True,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
