"""Exceptions raised by context builders and the currency registry."""

from __future__ import annotations

from typing import Sequence


class MonetaryError(Exception):
    """Base class of all errors raised by suite_money."""


class NullArgumentError(MonetaryError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, argument_name: str, method_name: str):
        self.argument_name = argument_name
        self.method_name = method_name
        super().__init__(f"Cannot call `{method_name}` because ${argument_name} is None")


class InvalidArgumentError(MonetaryError, ValueError):
    """Raised when a non-None argument violates a domain rule (e.g. empty rate types)."""

    def __init__(self, argument_name: str, method_name: str, reason: str):
        self.argument_name = argument_name
        self.method_name = method_name
        self.reason = reason
        super().__init__(f"Cannot call `{method_name}` because ${argument_name} is invalid: {reason}")


class UnknownCurrencyError(MonetaryError, LookupError):
    """Raised when no provider knows the requested currency code."""

    def __init__(self, code: str, providers: Sequence[str] = ()):
        self.code = code
        self.providers = tuple(providers)

        message = f"Unknown currency code '{code}'"
        if self.providers:
            message += f" (providers consulted: {', '.join(self.providers)})"
        else:
            message += " (no providers consulted)"

        super().__init__(message)
