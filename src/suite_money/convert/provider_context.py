from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from suite_money.context.attribute_container import AttributeContainer
from suite_money.context.context import Context
from suite_money.convert.rate_type import RateType
from suite_money.errors import InvalidArgumentError

if TYPE_CHECKING:
    from suite_money.convert.provider_context_builder import ProviderContextBuilder


class ProviderContext(Context):
    """Describes a rate provider: its name and the rate types it supports.

    Always holds a provider name and at least one `RateType`. Instances are created by
    `ProviderContextBuilder` (or the `of` shortcut) and never change afterwards.

    Example:
        >>> ctx = ProviderContext.of("ECB", RateType.DEFERRED, RateType.HISTORIC)
        >>> ctx.provider_name
        'ECB'
        >>> sorted(rt.name for rt in ctx.rate_types)
        ['DEFERRED', 'HISTORIC']
    """

    __slots__ = ()

    PROVIDER: ClassVar[str] = "provider"
    RATE_TYPES: ClassVar[str] = "rate_types"

    def __init__(self, attributes: AttributeContainer):
        """Wrap $attributes, which must hold a provider name and at least one RateType.

        Raises:
            InvalidArgumentError: If the provider name or the rate types are missing.
        """
        super().__init__(attributes)

        # Raise: provider name is required
        if self.get(self.PROVIDER, str) is None:
            raise InvalidArgumentError("attributes", "ProviderContext.__init__", f"attribute '{self.PROVIDER}' is required")

        # Raise: at least one rate type is required
        if not self.get_set(self.RATE_TYPES, RateType):
            raise InvalidArgumentError("attributes", "ProviderContext.__init__", "At least one RateType is required.")

    @classmethod
    def of(cls, provider: str, rate_type: RateType, *rate_types: RateType) -> ProviderContext:
        """Create a ProviderContext directly from a provider name and its rate type(s)."""
        from suite_money.convert.provider_context_builder import ProviderContextBuilder

        return ProviderContextBuilder.of(provider, rate_type, rate_types).build()

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return self.get(self.PROVIDER, str)

    @property
    def rate_types(self) -> frozenset[RateType]:
        """Get all supported rate types (never empty)."""
        return self.get_set(self.RATE_TYPES, RateType)

    @property
    def rate_type(self) -> RateType:
        """Get the single supported rate type.

        When several rate types are supported, returns the first one in `RateType`
        declaration order, so the result is deterministic.
        """
        rate_types = self.rate_types
        return next(rate_type for rate_type in RateType if rate_type in rate_types)

    def to_builder(self) -> ProviderContextBuilder:
        """Create a new builder pre-filled with this context's attributes."""
        from suite_money.convert.provider_context_builder import ProviderContextBuilder

        return ProviderContextBuilder.from_context(self)
