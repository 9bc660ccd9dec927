from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from suite_money.context.attribute_container import AttributeContainer
from suite_money.context.attribute_key import AttributeKey
from suite_money.context.context import Context
from suite_money.errors import InvalidArgumentError
from suite_money.utils.argument_checks import require_not_none

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="ContextBuilder")
C = TypeVar("C", bound=Context)


class ContextBuilder(ABC, Generic[B, C]):
    """Mutable accumulator of typed attributes that produces immutable Context(s).

    All mutators return the builder itself, so calls can be chained:

        context = (MyContextBuilder()
                   .set("provider", "ECB")
                   .set_set("rate_types", {RateType.DEFERRED})
                   .build())

    Every `build()` takes a fresh frozen snapshot of the working attributes, so the
    builder stays usable afterwards and later changes never reach a Context that was
    already built.

    Instances are not thread-safe. Use one builder per thread (or synchronize
    externally).
    """

    def __init__(self) -> None:
        self._attributes: dict[AttributeKey, Any] = {}

    # region Mutators

    def set(self, name: str, value: Any, value_type: type | None = None) -> B:
        """Store a single typed value under ($name, $value_type).

        Any previous value under the same key is replaced.

        Args:
            name: Attribute name.
            value: Value to store; None is not allowed.
            value_type: Declared type of the value. Defaults to `type(value)`.

        Returns:
            This builder, for chaining.

        Raises:
            NullArgumentError: If $name or $value is None.
            InvalidArgumentError: If $value is a set (use `set_set`), is not an instance of
                $value_type, or is not hashable.
        """
        require_not_none(name, "name", "set")
        require_not_none(value, "value", "set")

        # Raise: set-valued attributes have their own mutator
        if isinstance(value, (set, frozenset)):
            raise InvalidArgumentError("value", "set", f"attribute '{name}' is a set; use `set_set` for set-valued attributes")

        value_type = type(value) if value_type is None else value_type

        # Raise: value must match its declared type
        if not isinstance(value, value_type):
            raise InvalidArgumentError("value", "set", f"{value!r} is not an instance of '{value_type.__name__}'")

        # Raise: only immutable values can be stored
        try:
            hash(value)
        except TypeError:
            raise InvalidArgumentError("value", "set", f"{value!r} is not hashable; only immutable values can be stored") from None

        key = AttributeKey(name, value_type)
        self._attributes[key] = value
        logger.debug(f"{self.__class__.__name__} set attribute '{key}'")
        return self

    def set_set(self, name: str, values: Iterable[Any], element_type: type | None = None) -> B:
        """Store a defensive copy of $values as a set under ($name, $element_type).

        Duplicates collapse and iteration order is not preserved. An empty collection is
        accepted here; concrete builders reject it where their domain requires it.

        Args:
            name: Attribute name.
            values: Values to store; None is not allowed.
            element_type: Declared type of the elements. Inferred from the first element
                when omitted; required for an empty collection.

        Returns:
            This builder, for chaining.

        Raises:
            NullArgumentError: If $name or $values is None.
            InvalidArgumentError: If $values is a string, contains None or elements of the
                wrong type, or is empty without an $element_type.
        """
        require_not_none(name, "name", "set_set")
        require_not_none(values, "values", "set_set")

        # Raise: a string is iterable but never meant as a set of characters
        if isinstance(values, (str, bytes)):
            raise InvalidArgumentError("values", "set_set", f"attribute '{name}' needs a collection, not a string")

        frozen = frozenset(values)

        if element_type is None:
            # Raise: type of an empty set cannot be inferred
            if not frozen:
                raise InvalidArgumentError("element_type", "set_set", f"attribute '{name}' is empty, so $element_type must be given")
            element_type = type(next(iter(frozen)))

        for element in frozen:
            # Raise: every element must be a non-None instance of $element_type
            if element is None or not isinstance(element, element_type):
                raise InvalidArgumentError("values", "set_set", f"{element!r} is not an instance of '{element_type.__name__}'")

        key = AttributeKey(name, element_type)
        self._attributes[key] = frozen
        logger.debug(f"{self.__class__.__name__} set attribute '{key}' with {len(frozen)} value(s)")
        return self

    def import_context(self, context: Context, overwrite_duplicates: bool = True) -> B:
        """Copy all attributes of $context into this builder.

        The imported attributes become the baseline; subsequent setters only replace the
        keys they touch.

        Args:
            context: Context to import.
            overwrite_duplicates: If False, attributes already present in this builder are kept.

        Returns:
            This builder, for chaining.

        Raises:
            NullArgumentError: If $context is None.
            InvalidArgumentError: If $context is not a Context.
        """
        require_not_none(context, "context", "import_context")

        # Raise: only Context instances can be imported
        if not isinstance(context, Context):
            raise InvalidArgumentError("context", "import_context", f"expected Context, got type '{type(context).__name__}'")

        imported = 0
        for key, value in context.attributes.items():
            if not overwrite_duplicates and key in self._attributes:
                continue
            # Stored values are immutable (scalars or frozensets), so no aliasing is possible
            self._attributes[key] = value
            imported += 1

        logger.debug(f"{self.__class__.__name__} imported {imported} attribute(s) from {context.__class__.__name__}")
        return self

    def remove_attributes(self, *names: str) -> B:
        """Remove all attributes with the given $names, whatever their type.

        Returns:
            This builder, for chaining.
        """
        names_to_remove = set(names)
        for key in [key for key in self._attributes if key.name in names_to_remove]:
            del self._attributes[key]
        return self

    # endregion

    # region Working state

    def get(self, name: str, value_type: type) -> Any:
        """Return the current value under ($name, $value_type), or None when absent."""
        return self._attributes.get(AttributeKey(name, value_type))

    def _snapshot(self) -> AttributeContainer:
        """Return a frozen copy of the current working attributes."""
        return AttributeContainer(self._attributes)

    # endregion

    @abstractmethod
    def build(self) -> C:
        """Create a new immutable Context from the current state of this builder."""
        ...

    def __repr__(self) -> str:
        names = ", ".join(str(key) for key in self._attributes)
        return f"{self.__class__.__name__}({names})"
