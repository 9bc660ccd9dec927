from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from suite_money.context.attribute_key import AttributeKey

T = TypeVar("T")


def freeze_attribute_value(key: AttributeKey, value: Any) -> Any:
    """Return an immutable copy of $value checked against the type declared by $key.

    Sets (and frozensets) are copied into a new `frozenset`; their elements must be
    instances of `key.value_type`. Any other value must itself be an instance of
    `key.value_type`.

    Raises:
        TypeError: If $value (or one of its elements) does not match `key.value_type`
            or a scalar $value is not hashable.
    """
    if isinstance(value, (set, frozenset)):
        frozen = frozenset(value)
        for element in frozen:
            # Raise: every element of a set-valued attribute must match the declared element type
            if not isinstance(element, key.value_type):
                raise TypeError(f"Attribute '{key}' expects elements of type '{key.value_type.__name__}', but contains {element!r} of type '{type(element).__name__}'")
        return frozen

    # Raise: scalar value must match the declared type
    if not isinstance(value, key.value_type):
        raise TypeError(f"Attribute '{key}' expects value of type '{key.value_type.__name__}', but provided value {value!r} has type '{type(value).__name__}'")

    # Raise: scalar value must be hashable
    try:
        hash(value)
    except TypeError:
        raise TypeError(f"Attribute '{key}' holds unhashable value {value!r}; only immutable values can be stored") from None
    return value


class AttributeContainer(Mapping[AttributeKey, Any]):
    """Immutable mapping from `AttributeKey` to value, used as storage of every Context.

    Each entry is either a scalar value or a `frozenset` of values of the declared element
    type. The container copies its input on creation and offers no way to add, remove or
    replace entries afterwards, so it can be shared between threads without locking.
    """

    __slots__ = ("_entries", "_hash")

    def __init__(self, entries: Mapping[AttributeKey, Any] | None = None):
        """Create a container holding a frozen copy of $entries.

        Args:
            entries: Initial entries. None creates an empty container.

        Raises:
            TypeError: If a key is not `AttributeKey` or a value does not match its key's type.
        """
        frozen: dict[AttributeKey, Any] = {}
        for key, value in (entries or {}).items():
            # Raise: keys must be AttributeKey instances
            if not isinstance(key, AttributeKey):
                raise TypeError(f"Cannot create `AttributeContainer` because key {key!r} is not AttributeKey (got type '{type(key).__name__}')")
            # Raise: None is never stored; missing attributes are simply absent
            if value is None:
                raise TypeError(f"Cannot create `AttributeContainer` because value for key '{key}' is None")
            frozen[key] = freeze_attribute_value(key, value)

        object.__setattr__(self, "_entries", MappingProxyType(frozen))
        object.__setattr__(self, "_hash", None)

    # region Mapping protocol

    def __getitem__(self, key: AttributeKey) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[AttributeKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    # endregion

    # region Typed access

    def get_value(self, name: str, value_type: type[T], default: T | None = None) -> T | None:
        """Return the scalar value stored under ($name, $value_type), or $default."""
        return self._entries.get(AttributeKey(name, value_type), default)

    def is_set(self, key: AttributeKey) -> bool:
        """Check whether the entry under $key is set-valued.

        Raises:
            KeyError: If there is no entry under $key.
        """
        return isinstance(self._entries[key], frozenset)

    def keys_of_type(self, value_type: type) -> list[str]:
        """List attribute names stored with $value_type, in insertion order."""
        return [key.name for key in self._entries if key.value_type is value_type]

    def types_of(self, name: str) -> list[type]:
        """List value types stored under attribute $name, in insertion order."""
        return [key.value_type for key in self._entries if key.name == name]

    @property
    def is_empty(self) -> bool:
        return len(self._entries) == 0

    def to_dict(self) -> dict[AttributeKey, Any]:
        """Return a new plain dict with all entries (values stay immutable)."""
        return dict(self._entries)

    # endregion

    # region Immutability

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Cannot set attribute '{name}' because `AttributeContainer` is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete attribute '{name}' because `AttributeContainer` is immutable")

    # endregion

    # region Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeContainer):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash(frozenset(self._entries.items())))
        return self._hash

    def __repr__(self) -> str:
        items = ", ".join(f"{key}={value!r}" for key, value in sorted(self._entries.items(), key=lambda item: (item[0].name, item[0].value_type.__name__)))
        return f"{self.__class__.__name__}({items})"

    # endregion
