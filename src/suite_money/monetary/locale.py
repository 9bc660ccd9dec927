from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Locale:
    """Identifies a language and/or region used to look up currencies.

    $language is normalized to lower case and $country to upper case, so
    `Locale("ZH", "cn") == Locale("zh", "CN")`. Any part may be empty.

    Example:
        >>> str(Locale("zh", "CN"))
        'zh_CN'
        >>> Locale.from_str("_TEST1L").country
        'TEST1L'
    """

    language: str = ""
    country: str = ""
    variant: str = ""

    SEPARATOR: ClassVar[str] = "_"

    def __post_init__(self) -> None:
        for field_name in ("language", "country", "variant"):
            value = getattr(self, field_name)
            # Raise: every part must be a string (use "" for missing parts)
            if not isinstance(value, str):
                raise TypeError(f"Cannot create `Locale` because ${field_name} must be str, but provided value is: {value!r}")

        object.__setattr__(self, "language", self.language.strip().lower())
        object.__setattr__(self, "country", self.country.strip().upper())
        object.__setattr__(self, "variant", self.variant.strip())

    @classmethod
    def from_str(cls, value: str) -> Locale:
        """Parse a locale from strings like "zh_CN", "_TEST1L", "en" or "de_AT_EURO".

        Raises:
            ValueError: If $value has more than three parts.
        """
        parts = value.strip().replace("-", cls.SEPARATOR).split(cls.SEPARATOR) if value.strip() else []
        if len(parts) > 3:
            raise ValueError(f"Cannot call `Locale.from_str` because $value ('{value}') has more than 3 parts")
        return cls(*parts)

    def __str__(self) -> str:
        if self.variant:
            return self.SEPARATOR.join((self.language, self.country, self.variant))
        if self.country:
            return f"{self.language}{self.SEPARATOR}{self.country}"
        return self.language


# Common locales
CHINA = Locale("zh", "CN")
GERMANY = Locale("de", "DE")
FRANCE = Locale("fr", "FR")
ITALY = Locale("it", "IT")
JAPAN = Locale("ja", "JP")
UK = Locale("en", "GB")
US = Locale("en", "US")
CANADA = Locale("en", "CA")
SWITZERLAND = Locale("de", "CH")
