from __future__ import annotations

import logging
from typing import Iterable, Mapping

from suite_money.monetary.currency import Currency
from suite_money.monetary.locale import Locale

logger = logging.getLogger(__name__)


class InMemoryCurrencyProvider:
    """Currency provider backed by in-memory tables.

    Supports lookup by code and by locale. Locale entries are keyed either by a full
    `Locale` (exact match) or by a country code string (matches every locale of that
    country).

    Example:
        >>> usd = Currency("USD", 840, 2, "US Dollar")
        >>> provider = InMemoryCurrencyProvider([usd], locales={"US": ["USD"]})
        >>> provider.get_currency("USD") is usd
        True
        >>> provider.get_currencies(Locale("en", "US"))
        [Currency('USD', 840, 2)]
    """

    def __init__(self, currencies: Iterable[Currency], locales: Mapping[Locale | str, Iterable[str]] | None = None):
        """Create the provider.

        Args:
            currencies: Currencies known by this provider; codes must be unique.
            locales: Maps a `Locale` or a country code to currency codes, in preferred order.

        Raises:
            TypeError: If an item of $currencies is not Currency or a locale key has wrong type.
            ValueError: If a currency code is duplicated or $locales refers to an unknown code.
        """
        self._currencies_by_code: dict[str, Currency] = {}
        for currency in currencies:
            # Raise: only Currency instances can be provided
            if not isinstance(currency, Currency):
                raise TypeError(f"Cannot create `InMemoryCurrencyProvider` because {currency!r} is not Currency (got type '{type(currency).__name__}')")
            # Raise: currency codes must be unique within one provider
            if currency.code in self._currencies_by_code:
                raise ValueError(f"Cannot create `InMemoryCurrencyProvider` because currency code '{currency.code}' is duplicated")
            self._currencies_by_code[currency.code] = currency

        self._codes_by_locale: dict[Locale, tuple[str, ...]] = {}
        self._codes_by_country: dict[str, tuple[str, ...]] = {}
        for locale_key, codes in (locales or {}).items():
            codes = tuple(codes)
            for code in codes:
                # Raise: locale table may only refer to currencies of this provider
                if code not in self._currencies_by_code:
                    raise ValueError(f"Cannot create `InMemoryCurrencyProvider` because locale '{locale_key}' refers to unknown currency code '{code}'")

            if isinstance(locale_key, Locale):
                self._codes_by_locale[locale_key] = codes
            elif isinstance(locale_key, str):
                self._codes_by_country[locale_key.strip().upper()] = codes
            else:
                raise TypeError(f"Cannot create `InMemoryCurrencyProvider` because locale key {locale_key!r} is neither Locale nor str")

        logger.debug(f"Created InMemoryCurrencyProvider with {len(self._currencies_by_code)} currency(ies) and {len(self._codes_by_locale) + len(self._codes_by_country)} locale entry(ies)")

    def get_currency(self, code: str) -> Currency | None:
        return self._currencies_by_code.get(code)

    def get_currencies(self, locale: Locale) -> list[Currency]:
        """Return currencies for the exact $locale first, then those of its country."""
        codes = list(self._codes_by_locale.get(locale, ()))
        for code in self._codes_by_country.get(locale.country, ()):
            if code not in codes:
                codes.append(code)
        return [self._currencies_by_code[code] for code in codes]

    def list_currencies(self) -> list[Currency]:
        """List all currencies of this provider in insertion order."""
        return list(self._currencies_by_code.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(currencies={len(self._currencies_by_code)})"
