from __future__ import annotations

from typing import Any, TypeVar

from suite_money.context.attribute_container import AttributeContainer
from suite_money.context.attribute_key import AttributeKey

T = TypeVar("T")


class Context:
    """Immutable bundle of typed attributes describing a capability or configuration.

    A Context is created only by its `ContextBuilder`. It wraps a frozen
    `AttributeContainer`, so it never changes after construction and can be shared
    across threads freely.

    Concrete contexts (e.g. `ProviderContext`) add strongly-typed properties on top of
    the generic accessors defined here.
    """

    __slots__ = ("_attributes",)

    def __init__(self, attributes: AttributeContainer):
        # Raise: Context must wrap an AttributeContainer (never a mutable dict)
        if not isinstance(attributes, AttributeContainer):
            raise TypeError(f"Cannot create `{self.__class__.__name__}` because $attributes is not AttributeContainer (got type '{type(attributes).__name__}')")
        object.__setattr__(self, "_attributes", attributes)

    # region Generic access

    @property
    def attributes(self) -> AttributeContainer:
        """Get the underlying immutable attribute container."""
        return self._attributes

    def get(self, name: str, value_type: type[T], default: T | None = None) -> T | None:
        """Return the scalar attribute ($name, $value_type), or $default when absent."""
        return self._attributes.get_value(name, value_type, default)

    def get_set(self, name: str, element_type: type[T]) -> frozenset[T]:
        """Return the set-valued attribute ($name, $element_type), or an empty frozenset."""
        value = self._attributes.get(AttributeKey(name, element_type))
        if value is None:
            return frozenset()
        # Raise: attribute exists but is scalar
        if not isinstance(value, frozenset):
            raise TypeError(f"Cannot call `get_set` because attribute '{name}' of type '{element_type.__name__}' is not set-valued")
        return value

    def get_text(self, name: str) -> str | None:
        return self.get(name, str)

    def get_int(self, name: str) -> int | None:
        return self.get(name, int)

    def get_bool(self, name: str) -> bool | None:
        return self.get(name, bool)

    def keys_of_type(self, value_type: type) -> list[str]:
        return self._attributes.keys_of_type(value_type)

    def types_of(self, name: str) -> list[type]:
        return self._attributes.types_of(name)

    @property
    def is_empty(self) -> bool:
        return self._attributes.is_empty

    # endregion

    # region Immutability

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Cannot set attribute '{name}' because `{self.__class__.__name__}` is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete attribute '{name}' because `{self.__class__.__name__}` is immutable")

    # endregion

    # region Value semantics

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self._attributes == other._attributes

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._attributes))

    def __repr__(self) -> str:
        items = ", ".join(f"{key}={self._attributes[key]!r}" for key in sorted(self._attributes, key=lambda k: (k.name, k.value_type.__name__)))
        return f"{self.__class__.__name__}({items})"

    # endregion
