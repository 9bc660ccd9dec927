__version__ = "0.0.1"

from suite_money.context.context import Context
from suite_money.context.context_builder import ContextBuilder
from suite_money.convert.provider_context import ProviderContext
from suite_money.convert.provider_context_builder import ProviderContextBuilder
from suite_money.convert.rate_type import RateType
from suite_money.errors import InvalidArgumentError, MonetaryError, NullArgumentError, UnknownCurrencyError
from suite_money.monetary.currency import Currency
from suite_money.monetary.locale import Locale
from suite_money.monetary.monetary_currencies import CurrencyRegistry

__all__ = [
    "Context",
    "ContextBuilder",
    "ProviderContext",
    "ProviderContextBuilder",
    "RateType",
    "MonetaryError",
    "NullArgumentError",
    "InvalidArgumentError",
    "UnknownCurrencyError",
    "Currency",
    "Locale",
    "CurrencyRegistry",
]
