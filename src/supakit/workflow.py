"""
supakit - Workflows.

A workflow is an ordinary `async def`. The decorator only names it in the
debug log; awaiting, returning, loops, try/except/finally and `async with`
inside it are plain Python and behave exactly as they would undecorated.

    @auth_workflow
    async def login_and_fetch(client, email, password):
        await auth.sign_in(client, email, password)
        match await auth.current_user(client):
            case Some(user):
                return user.id
        return None
"""

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def workflow(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Mark an async function as a workflow. Results and exceptions pass through."""
    if not inspect.iscoroutinefunction(func):
        raise TypeError(f"workflow() needs an async function, got {func!r}")

    name = func.__qualname__

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        logger.debug(f"Workflow {name} started")
        try:
            result = await func(*args, **kwargs)
        except BaseException as e:
            logger.debug(f"Workflow {name} raised {type(e).__name__}")
            raise
        logger.debug(f"Workflow {name} finished")
        return result

    return wrapper


# Auth steps are sequenced the same way as any other workflow
auth_workflow = workflow
