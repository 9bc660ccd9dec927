from suite_money.monetary.currency import Currency
from suite_money.monetary.in_memory_currency_provider import InMemoryCurrencyProvider

BUILTIN_PROVIDER_NAME = "builtin"

# Major currencies
USD = Currency("USD", 840, 2, "US Dollar")
EUR = Currency("EUR", 978, 2, "Euro")
GBP = Currency("GBP", 826, 2, "British Pound")
JPY = Currency("JPY", 392, 0, "Japanese Yen")
CHF = Currency("CHF", 756, 2, "Swiss Franc")
CNY = Currency("CNY", 156, 2, "Chinese Yuan")
CAD = Currency("CAD", 124, 2, "Canadian Dollar")
AUD = Currency("AUD", 36, 2, "Australian Dollar")
NZD = Currency("NZD", 554, 2, "New Zealand Dollar")

# Other currencies
SEK = Currency("SEK", 752, 2, "Swedish Krona")
NOK = Currency("NOK", 578, 2, "Norwegian Krone")
DKK = Currency("DKK", 208, 2, "Danish Krone")
PLN = Currency("PLN", 985, 2, "Polish Zloty")
CZK = Currency("CZK", 203, 2, "Czech Koruna")
HUF = Currency("HUF", 348, 2, "Hungarian Forint")
INR = Currency("INR", 356, 2, "Indian Rupee")
KRW = Currency("KRW", 410, 0, "South Korean Won")
HKD = Currency("HKD", 344, 2, "Hong Kong Dollar")
SGD = Currency("SGD", 702, 2, "Singapore Dollar")
BRL = Currency("BRL", 986, 2, "Brazilian Real")
MXN = Currency("MXN", 484, 2, "Mexican Peso")
ZAR = Currency("ZAR", 710, 2, "South African Rand")
TRY = Currency("TRY", 949, 2, "Turkish Lira")

BUILTIN_CURRENCIES = (USD, EUR, GBP, JPY, CHF, CNY, CAD, AUD, NZD, SEK, NOK, DKK, PLN, CZK, HUF, INR, KRW, HKD, SGD, BRL, MXN, ZAR, TRY)

# Country code -> currency codes used there
BUILTIN_CURRENCIES_BY_COUNTRY = {
    "US": ("USD",),
    "DE": ("EUR",),
    "AT": ("EUR",),
    "BE": ("EUR",),
    "ES": ("EUR",),
    "FI": ("EUR",),
    "FR": ("EUR",),
    "GR": ("EUR",),
    "IE": ("EUR",),
    "IT": ("EUR",),
    "NL": ("EUR",),
    "PT": ("EUR",),
    "GB": ("GBP",),
    "JP": ("JPY",),
    "CH": ("CHF",),
    "LI": ("CHF",),
    "CN": ("CNY",),
    "CA": ("CAD",),
    "AU": ("AUD",),
    "NZ": ("NZD",),
    "SE": ("SEK",),
    "NO": ("NOK",),
    "DK": ("DKK",),
    "PL": ("PLN",),
    "CZ": ("CZK",),
    "HU": ("HUF",),
    "IN": ("INR",),
    "KR": ("KRW",),
    "HK": ("HKD",),
    "SG": ("SGD",),
    "BR": ("BRL",),
    "MX": ("MXN",),
    "ZA": ("ZAR",),
    "TR": ("TRY",),
}


def create_builtin_provider() -> InMemoryCurrencyProvider:
    """Create a provider with the predefined currencies and their countries."""
    return InMemoryCurrencyProvider(BUILTIN_CURRENCIES, locales=BUILTIN_CURRENCIES_BY_COUNTRY)
