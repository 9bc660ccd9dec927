from __future__ import annotations


class Currency:
    """Represents a currency with code, numeric code and default fraction digits.

    Currencies are plain reference-data records: they are produced by currency
    providers and looked up through `suite_money.monetary.monetary_currencies`.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC"). Kept exactly as given.
        numeric_code (int): ISO-4217 numeric code, or -1 when not defined.
        default_fraction_digits (int): Number of decimal places (0-18).
        name (str | None): Optional full currency name.
    """

    __slots__ = ("_code", "_numeric_code", "_default_fraction_digits", "_name")

    def __init__(self, code: str, numeric_code: int = -1, default_fraction_digits: int = 2, name: str | None = None):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BTC").
            numeric_code (int): Numeric code; -1 when the currency has none.
            default_fraction_digits (int): Number of decimal places (0-18).
            name (str | None): Full currency name.

        Raises:
            ValueError: If parameters are invalid.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if isinstance(numeric_code, bool) or not isinstance(numeric_code, int) or numeric_code < -1:
            raise ValueError(f"$numeric_code must be an integer >= -1, but provided value is: {numeric_code}")

        if isinstance(default_fraction_digits, bool) or not isinstance(default_fraction_digits, int) or default_fraction_digits < 0 or default_fraction_digits > 18:
            raise ValueError(f"$default_fraction_digits must be an integer between 0 and 18, but provided value is: {default_fraction_digits}")

        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ValueError(f"$name must be None or a non-empty string, but provided value is: '{name}'")

        self._code = code.strip()
        self._numeric_code = numeric_code
        self._default_fraction_digits = default_fraction_digits
        self._name = name.strip() if name is not None else None

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def numeric_code(self) -> int:
        """Get the numeric currency code (-1 if undefined)."""
        return self._numeric_code

    @property
    def default_fraction_digits(self) -> int:
        """Get the default number of fraction digits."""
        return self._default_fraction_digits

    @property
    def name(self) -> str | None:
        """Get the currency name."""
        return self._name

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.numeric_code}, {self.default_fraction_digits})"
