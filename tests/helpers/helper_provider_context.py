from __future__ import annotations

from suite_money.convert.provider_context import ProviderContext
from suite_money.convert.provider_context_builder import ProviderContextBuilder
from suite_money.convert.rate_type import RateType


def create_ecb_context() -> ProviderContext:
    """Create a ProviderContext for a deferred/historic rate provider named "ECB"."""
    return ProviderContextBuilder("ECB", [RateType.DEFERRED, RateType.HISTORIC]).set("url", "https://www.ecb.europa.eu").build()


def create_realtime_context(provider: str = "IMF") -> ProviderContext:
    """Create a ProviderContext with a single REALTIME rate type."""
    return ProviderContextBuilder.of(provider, RateType.REALTIME).build()
