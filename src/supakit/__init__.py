"""
supakit - Pythonic helpers for supabase-py.

- aio: futures <-> coroutines, and one calling convention for Client and AsyncClient
- option: Some / Nothing for the SDK's nullable values
- options: fluent builder for client options
- workflow: decorator for sequenced async steps
- client, auth, realtime, storage, functions: client-first wrappers over the SDK
"""

from supakit.aio import as_concurrent_future, as_coroutine, as_task, call, run_sync
from supakit.option import (
    Nothing,
    Option,
    Some,
    default_value,
    default_with,
    from_nullable,
    to_nullable,
)
from supakit.options import ClientConfig, OptionsBuilder, supabase_options
from supakit.workflow import auth_workflow, workflow

__version__ = "1.0.0"

__all__ = [
    "ClientConfig",
    "Nothing",
    "Option",
    "OptionsBuilder",
    "Some",
    "as_concurrent_future",
    "as_coroutine",
    "as_task",
    "auth_workflow",
    "call",
    "default_value",
    "default_with",
    "from_nullable",
    "run_sync",
    "supabase_options",
    "to_nullable",
    "workflow",
]
