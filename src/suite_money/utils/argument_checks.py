from __future__ import annotations

from collections.abc import Sized
from typing import TypeVar

from suite_money.errors import InvalidArgumentError, NullArgumentError

T = TypeVar("T")


def require_not_none(value: T | None, argument_name: str, method_name: str) -> T:
    """Return $value unchanged or raise `NullArgumentError` when it is None.

    Args:
        value: Value to check.
        argument_name: Name of the checked argument, used in the error message.
        method_name: Name of the calling method, used in the error message.

    Returns:
        The same $value.

    Raises:
        NullArgumentError: If $value is None.
    """
    if value is None:
        raise NullArgumentError(argument_name, method_name)
    return value


def require_not_empty(values: Sized, argument_name: str, method_name: str, reason: str) -> None:
    """Raise `InvalidArgumentError` with $reason when $values has no items."""
    if len(values) == 0:
        raise InvalidArgumentError(argument_name, method_name, reason)
