import pytest

from suite_money.monetary.currency import Currency
from suite_money.monetary.currency_registry import EUR, JPY, USD, create_builtin_provider
from suite_money.monetary.locale import CHINA, Locale


def test_currency_keeps_code_case_and_fields():
    currency = Currency("test1", 1, 2)

    assert currency.code == "test1"
    assert currency.numeric_code == 1
    assert currency.default_fraction_digits == 2
    assert currency.name is None
    assert repr(currency) == "Currency('test1', 1, 2)"
    assert str(currency) == "test1"


def test_currency_equality_by_code():
    assert Currency("USD", 840, 2, "US Dollar") == USD
    assert hash(Currency("USD", 840, 2)) == hash(USD)
    assert USD != EUR
    assert USD != "USD"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"code": ""},
        {"code": "X", "numeric_code": -2},
        {"code": "X", "numeric_code": True},
        {"code": "X", "default_fraction_digits": 19},
        {"code": "X", "default_fraction_digits": -1},
        {"code": "X", "name": " "},
    ],
)
def test_currency_rejects_invalid_fields(kwargs):
    with pytest.raises(ValueError):
        Currency(**kwargs)


def test_builtin_provider_resolves_codes_and_countries():
    provider = create_builtin_provider()

    assert provider.get_currency("JPY") is JPY
    assert provider.get_currency("XXX") is None
    assert provider.get_currencies(CHINA)[0].code == "CNY"
    assert provider.get_currencies(Locale("fr", "FR")) == [EUR]
    assert provider.get_currencies(Locale("en", "")) == []
