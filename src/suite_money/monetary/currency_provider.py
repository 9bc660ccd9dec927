from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from suite_money.monetary.currency import Currency
from suite_money.monetary.locale import Locale


# region Interface


@runtime_checkable
class CurrencyProvider(Protocol):
    """Supplies currencies by code.

    Providers are registered into a `CurrencyRegistry`, which consults them in order
    and treats them polymorphically.
    """

    def get_currency(self, code: str) -> Currency | None:
        """Return the currency for $code, or None when this provider does not know it.

        Must not raise for unknown codes.

        Args:
            code: Currency code to look up.
        """
        ...


@runtime_checkable
class LocaleCurrencyProvider(Protocol):
    """Optional capability of a provider: supplies the currencies used in a locale.

    Providers without this capability are skipped by locale queries.
    """

    def get_currencies(self, locale: Locale) -> Sequence[Currency]:
        """Return all currencies this provider knows for $locale.

        Returns an empty sequence (never raises) when there are none.

        Args:
            locale: Locale to look up; usually only its country is relevant.
        """
        ...


# endregion
