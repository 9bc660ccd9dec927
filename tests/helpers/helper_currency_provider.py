from __future__ import annotations

from suite_money.monetary.currency import Currency
from suite_money.monetary.in_memory_currency_provider import InMemoryCurrencyProvider
from suite_money.monetary.locale import Locale


class CodeOnlyCurrencyProvider:
    """Provider that supports lookup by code only (no locale capability)."""

    def __init__(self, *currencies: Currency) -> None:
        self._currencies_by_code = {currency.code: currency for currency in currencies}
        self.lookups: list[str] = []

    def get_currency(self, code: str) -> Currency | None:
        self.lookups.append(code)
        return self._currencies_by_code.get(code)


class FixedLocaleCurrencyProvider:
    """Provider returning the same currencies for one locale, and nothing by code."""

    def __init__(self, locale: Locale, *currencies: Currency) -> None:
        self._locale = locale
        self._currencies = list(currencies)

    def get_currency(self, code: str) -> Currency | None:
        return None

    def get_currencies(self, locale: Locale) -> list[Currency]:
        return list(self._currencies) if locale == self._locale else []


def create_test_provider() -> InMemoryCurrencyProvider:
    """Create the provider used by registry scenarios.

    Knows currency code "test1" (numeric code 1, 2 fraction digits) and currency
    "TEST1L" for the country "TEST1L".
    """
    test1 = Currency("test1", 1, 2)
    test1l = Currency("TEST1L", 1, 2)
    return InMemoryCurrencyProvider([test1, test1l], locales={"TEST1L": ["TEST1L"]})
