from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttributeKey:
    """Identifies one attribute of a Context by its name and value type.

    Two attributes with the same $name but different $value_type are different keys.
    For set-valued attributes, $value_type is the type of the set elements.

    Example:
        >>> AttributeKey("provider", str)
        AttributeKey(name='provider', value_type=<class 'str'>)
        >>> print(AttributeKey("provider", str))
        provider:str

    Attributes:
        name: Attribute name (e.g. "provider", "rate_types").
        value_type: Type of the stored value (or of the set elements).
    """

    name: str
    value_type: type

    def __post_init__(self) -> None:
        # Raise: $name must be a non-empty string
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Cannot create `AttributeKey` because $name must be a non-empty string, but provided value is: '{self.name}'")

        # Raise: $value_type must be a class
        if not isinstance(self.value_type, type):
            raise TypeError(f"Cannot create `AttributeKey` because $value_type must be a type, but provided value is: {self.value_type!r}")

    def __str__(self) -> str:
        return f"{self.name}:{self.value_type.__name__}"
