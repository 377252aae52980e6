"""
supakit - Optional Values.

supabase-py returns None for absent sessions, users, tokens and rows.
Some / Nothing make absence explicit at the call site:

    match await auth.current_user(client):
        case Some(user):
            print(user.id)
        case _:
            print("signed out")

Laws:
- to_nullable(from_nullable(v)) == v for every v, None included
- from_nullable(to_nullable(opt)) == opt for every option

Some(None) cannot be built, so the second law has no exception.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """A present value."""

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Some() cannot wrap None; use Nothing")

    def __bool__(self) -> bool:
        return True


class _NothingType:
    """The absent value. Use the `Nothing` singleton."""

    _instance: "_NothingType | None" = None

    def __new__(cls) -> "_NothingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> str:
        return "Nothing"


Nothing = _NothingType()

Option = Union[Some[T], _NothingType]


def from_nullable(value: T | None) -> "Option[T]":
    """Some(value) when value is not None, Nothing otherwise."""
    if value is None:
        return Nothing
    return Some(value)


def to_nullable(opt: "Option[T]") -> T | None:
    """The wrapped value, or None for Nothing."""
    if isinstance(opt, Some):
        return opt.value
    return None


def default_value(opt: "Option[T]", default: T) -> T:
    """The wrapped value, or `default` for Nothing."""
    if isinstance(opt, Some):
        return opt.value
    return default


def default_with(opt: "Option[T]", thunk: Callable[[], T]) -> T:
    """The wrapped value, or the result of `thunk()` for Nothing."""
    if isinstance(opt, Some):
        return opt.value
    return thunk()


# =============================================================================
# SDK field accessors
# =============================================================================


def _field(obj: Any, name: str) -> "Option[Any]":
    return from_nullable(getattr(obj, name, None))


def access_token_of(session: Any) -> "Option[str]":
    """Session access token."""
    return _field(session, "access_token")


def refresh_token_of(session: Any) -> "Option[str]":
    """Session refresh token."""
    return _field(session, "refresh_token")


def user_of(session: Any) -> "Option[Any]":
    """The user a session belongs to."""
    return _field(session, "user")


def email_of(user: Any) -> "Option[str]":
    return _field(user, "email")


def phone_of(user: Any) -> "Option[str]":
    return _field(user, "phone")
