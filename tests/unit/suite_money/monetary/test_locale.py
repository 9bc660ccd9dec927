import pytest

from suite_money.monetary.locale import CHINA, Locale


def test_locale_normalizes_case():
    assert Locale("ZH", "cn") == CHINA
    assert Locale("", "test1l").country == "TEST1L"


def test_locale_string_forms():
    assert str(CHINA) == "zh_CN"
    assert str(Locale("", "TEST1L")) == "_TEST1L"
    assert str(Locale("en")) == "en"
    assert str(Locale("de", "AT", "EURO")) == "de_AT_EURO"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("zh_CN", Locale("zh", "CN")),
        ("zh-CN", Locale("zh", "CN")),
        ("_TEST1L", Locale("", "TEST1L")),
        ("en", Locale("en")),
        ("", Locale()),
        ("de_AT_EURO", Locale("de", "AT", "EURO")),
    ],
)
def test_locale_from_str(value, expected):
    assert Locale.from_str(value) == expected


def test_locale_rejects_invalid_input():
    with pytest.raises(ValueError):
        Locale.from_str("a_b_c_d")
    with pytest.raises(TypeError):
        Locale(None, "CN")
