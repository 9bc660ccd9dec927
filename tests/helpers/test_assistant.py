from __future__ import annotations

from tests.helpers import helper_currency_provider, helper_provider_context


class TestAssistant:
    """Central access point for ready-made domain objects in tests.

    Attributes:
        currency_provider: Module with helper currency providers.
        provider_context: Module with helper functions for ProviderContext fixtures.

    All objects are created fresh by calling helper functions, so there is no shared
    mutable state between tests.
    """

    __test__ = False

    def __init__(self) -> None:
        self.currency_provider = helper_currency_provider
        self.provider_context = helper_provider_context


# Singleton entry point for tests; it only exposes factory namespaces.
TEST_ASSISTANT = TestAssistant()
