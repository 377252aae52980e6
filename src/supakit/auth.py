"""
supakit - Auth Wrappers.

Thin coroutines over the client's gotrue auth API. Failed sign-ins and other
gotrue errors (AuthApiError, AuthInvalidCredentialsError, ...) propagate
unchanged.
"""

import logging
from typing import Any

from supakit.aio import call
from supakit.option import Nothing, Option, Some, from_nullable, user_of

logger = logging.getLogger(__name__)


async def sign_in(client: Any, email: str, password: str) -> Any:
    """Sign in with email and password. Returns gotrue's AuthResponse."""
    logger.debug("Signing in with password")
    return await call(
        client.auth.sign_in_with_password,
        {"email": email, "password": password},
    )


async def sign_up(client: Any, email: str, password: str) -> Any:
    """Register a new user. Returns gotrue's AuthResponse."""
    logger.debug("Signing up")
    return await call(client.auth.sign_up, {"email": email, "password": password})


async def sign_up_with_options(
    client: Any,
    email: str,
    password: str,
    options: dict[str, Any],
) -> Any:
    """
    Register a new user with gotrue sign-up options.

    `options` takes gotrue's keys, e.g. {"data": {...}, "email_redirect_to": "..."}.
    """
    logger.debug("Signing up with options")
    return await call(
        client.auth.sign_up,
        {"email": email, "password": password, "options": options},
    )


async def sign_out(client: Any) -> None:
    logger.debug("Signing out")
    await call(client.auth.sign_out)


async def retrieve_session(client: Any) -> Any:
    """The stored session (refreshed by gotrue if expired), or None."""
    return await call(client.auth.get_session)


async def current_session(client: Any) -> Option[Any]:
    """The current session as an Option."""
    return from_nullable(await retrieve_session(client))


async def current_user(client: Any) -> Option[Any]:
    """The signed-in user as an Option. Read from the session, no extra request."""
    session = await current_session(client)
    if isinstance(session, Some):
        return user_of(session.value)
    return Nothing


async def refresh_session(client: Any) -> Any:
    """Exchange the refresh token for a new session. Returns gotrue's AuthResponse."""
    return await call(client.auth.refresh_session)


async def reset_password_for_email(client: Any, email: str) -> None:
    """Send a password recovery email."""
    await call(client.auth.reset_password_for_email, email)


async def update_user(client: Any, attributes: dict[str, Any]) -> Any:
    """
    Update the signed-in user.

    `attributes` takes gotrue's UserAttributes keys: email, phone, password, data.
    """
    return await call(client.auth.update_user, attributes)
