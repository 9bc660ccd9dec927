from __future__ import annotations

from collections.abc import Iterable

from suite_money.context.context_builder import ContextBuilder
from suite_money.convert.provider_context import ProviderContext
from suite_money.convert.rate_type import RateType
from suite_money.errors import InvalidArgumentError, NullArgumentError
from suite_money.utils.argument_checks import require_not_empty, require_not_none

AT_LEAST_ONE_RATE_TYPE = "At least one RateType is required."


class ProviderContextBuilder(ContextBuilder["ProviderContextBuilder", ProviderContext]):
    """Builder of `ProviderContext` instances.

    The dedicated setters (`set_provider_name`, `set_rate_types`) keep a provider name
    and at least one `RateType` in place. The generic mutators (`set`, `set_set`,
    `remove_attributes`) can still remove them, so `build()` raises
    `InvalidArgumentError` when either is missing.

    Example:
        >>> ctx = (ProviderContextBuilder("ECB", [RateType.DEFERRED])
        ...        .set("url", "https://www.ecb.europa.eu")
        ...        .build())
        >>> changed = ctx.to_builder().set_rate_types(RateType.HISTORIC).build()

    Instances are not thread-safe.
    """

    def __init__(self, provider: str, rate_types: Iterable[RateType]):
        """Create a builder from a provider name and a collection of rate types.

        Args:
            provider: Provider name.
            rate_types: Supported rate types; duplicates collapse.

        Raises:
            NullArgumentError: If $provider or $rate_types is None.
            InvalidArgumentError: If $rate_types is empty or holds a non-RateType value.
        """
        super().__init__()
        validated_rate_types = self._validate_rate_types(rate_types, "ProviderContextBuilder.__init__")
        self.set_provider_name(provider)
        self.set_set(ProviderContext.RATE_TYPES, validated_rate_types, RateType)

    # region Factories

    @classmethod
    def of(cls, provider: str, rate_type: RateType, additional_rate_types: Iterable[RateType] = ()) -> ProviderContextBuilder:
        """Create a builder from a provider name, a primary rate type and optional extra ones.

        Args:
            provider: Provider name.
            rate_type: Primary rate type.
            additional_rate_types: Further rate types; may be empty but not None.

        Raises:
            NullArgumentError: If $provider, $rate_type or $additional_rate_types is None.
        """
        require_not_none(rate_type, "rate_type", "ProviderContextBuilder.of")
        require_not_none(additional_rate_types, "additional_rate_types", "ProviderContextBuilder.of")
        return cls(provider, [rate_type, *additional_rate_types])

    @classmethod
    def from_context(cls, context: ProviderContext) -> ProviderContextBuilder:
        """Create a builder using all attributes of $context as defaults.

        The rate-type set of the new builder is a fresh copy, never shared with $context.

        Raises:
            NullArgumentError: If $context is None.
        """
        require_not_none(context, "context", "ProviderContextBuilder.from_context")
        builder = cls(context.provider_name, context.rate_types)
        builder.import_context(context)
        builder.set_set(ProviderContext.RATE_TYPES, set(context.rate_types), RateType)
        return builder

    # endregion

    # region Setters

    def set_provider_name(self, provider: str) -> ProviderContextBuilder:
        """Set the provider name (no format validation).

        Raises:
            NullArgumentError: If $provider is None.
        """
        require_not_none(provider, "provider", "set_provider_name")
        return self.set(ProviderContext.PROVIDER, provider, str)

    def set_rate_types(self, *rate_types: RateType) -> ProviderContextBuilder:
        """Replace the supported rate types with the given ones.

        Raises:
            NullArgumentError: If any given rate type is None.
            InvalidArgumentError: If no rate type is given.
        """
        return self.set_rate_types_from(rate_types)

    def set_rate_types_from(self, rate_types: Iterable[RateType]) -> ProviderContextBuilder:
        """Replace the supported rate types with a deduplicated copy of $rate_types.

        Raises:
            NullArgumentError: If $rate_types (or one of its items) is None.
            InvalidArgumentError: If $rate_types is empty or holds a non-RateType value.
        """
        validated_rate_types = self._validate_rate_types(rate_types, "set_rate_types")
        return self.set_set(ProviderContext.RATE_TYPES, validated_rate_types, RateType)

    # endregion

    def build(self) -> ProviderContext:
        """Create a new ProviderContext from the current state of this builder.

        Raises:
            InvalidArgumentError: If the provider name or all rate types were removed
                through the generic mutators.
        """
        return ProviderContext(self._snapshot())

    @staticmethod
    def _validate_rate_types(rate_types: Iterable[RateType], method_name: str) -> frozenset[RateType]:
        require_not_none(rate_types, "rate_types", method_name)

        # Raise: a single RateType passed where a collection is expected
        if isinstance(rate_types, RateType):
            raise InvalidArgumentError("rate_types", method_name, f"expected a collection of RateType, got single {rate_types}")

        validated = frozenset(rate_types)

        # Raise: None items are null arguments too
        if None in validated:
            raise NullArgumentError("rate_types", method_name)

        for rate_type in validated:
            # Raise: only RateType values are allowed
            if not isinstance(rate_type, RateType):
                raise InvalidArgumentError("rate_types", method_name, f"{rate_type!r} is not a RateType")

        require_not_empty(validated, "rate_types", method_name, AT_LEAST_ONE_RATE_TYPE)
        return validated
