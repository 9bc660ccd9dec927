from __future__ import annotations

import logging
from threading import Lock
from types import MappingProxyType
from typing import Iterable, Mapping

from bidict import bidict

from suite_money.config import RegistrySettings, load_registry_settings
from suite_money.errors import UnknownCurrencyError
from suite_money.monetary.currency import Currency
from suite_money.monetary.currency_provider import CurrencyProvider, LocaleCurrencyProvider
from suite_money.monetary.currency_registry import BUILTIN_PROVIDER_NAME, create_builtin_provider
from suite_money.monetary.locale import Locale
from suite_money.utils.argument_checks import require_not_none

logger = logging.getLogger(__name__)

ProviderChain = tuple[tuple[str, CurrencyProvider], ...]


class CurrencyRegistry:
    """Resolves currencies by code or by locale through an ordered chain of providers.

    Providers are registered explicitly under unique names. Queries consult the
    default provider chain (all providers in registration order, unless configured
    otherwise) or an explicit list of provider names.

    Lookup policy:

    - By code: the first provider that knows the code wins. When none does,
      `UnknownCurrencyError` is raised.
    - By locale: results of all providers supporting locale lookup are concatenated
      in provider order. When none has a match, the result is an empty list.

    Registration is serialized by a lock. Queries never lock: they read immutable
    snapshots of the provider table and chain, which registration replaces as a whole,
    so a query running concurrently with registration always sees a consistent chain.
    """

    # region Init

    def __init__(self):
        """Create an empty CurrencyRegistry."""
        self._lock = Lock()

        # Providers (guarded by $_lock)
        self._providers_by_name_bidict: bidict[str, CurrencyProvider] = bidict()
        self._default_chain_names: tuple[str, ...] = ()

        # Snapshots read by queries (replaced as a whole under $_lock)
        self._providers_snapshot: Mapping[str, CurrencyProvider] = MappingProxyType({})
        self._default_chain: ProviderChain = ()

    # endregion

    # region Provider(s)

    def register_provider(self, name: str, provider: CurrencyProvider) -> None:
        """Register a CurrencyProvider under a unique name.

        Args:
            name: Unique provider name within this registry.
            provider: The provider instance. It may also implement `LocaleCurrencyProvider`.

        Raises:
            ValueError: If $name is empty, already registered, or $provider is already
                registered under another name.
            TypeError: If $provider does not implement `CurrencyProvider`.
        """
        # Raise: provider name must be a non-empty string
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Cannot call `register_provider` because $name must be a non-empty string, but provided value is: '{name}'")

        # Raise: provider must implement the CurrencyProvider protocol
        if not isinstance(provider, CurrencyProvider):
            raise TypeError(f"Cannot call `register_provider` because $provider (class {provider.__class__.__name__}) does not implement `CurrencyProvider`")

        with self._lock:
            # Precondition: provider name must be unique and not already registered
            if name in self._providers_by_name_bidict:
                raise ValueError(f"Cannot call `register_provider` because CurrencyProvider named ('{name}') is already registered in this CurrencyRegistry. Choose a different name.")

            # Precondition: the same provider instance cannot be registered twice
            if provider in self._providers_by_name_bidict.inverse:
                existing_name = self._providers_by_name_bidict.inverse[provider]
                raise ValueError(f"Cannot call `register_provider` because $provider is already registered as '{existing_name}'")

            self._providers_by_name_bidict[name] = provider
            self._publish_snapshots()

        logger.debug(f"CurrencyRegistry registered CurrencyProvider named '{name}' (class {provider.__class__.__name__})")

    def unregister_provider(self, name: str) -> None:
        """Remove a CurrencyProvider by name.

        Args:
            name: The provider name to remove.

        Raises:
            KeyError: If no provider with the given $name is registered.
        """
        with self._lock:
            # Precondition: provider name must be registered before removing
            if name not in self._providers_by_name_bidict:
                raise KeyError(f"Cannot call `unregister_provider` because provider name $name ('{name}') is not registered in this CurrencyRegistry. Register the provider using `register_provider` first.")

            del self._providers_by_name_bidict[name]
            self._publish_snapshots()

        logger.debug(f"CurrencyRegistry unregistered CurrencyProvider named '{name}'")

    @property
    def providers(self) -> Mapping[str, CurrencyProvider]:
        """Get a read-only snapshot of all providers keyed by name, in registration order."""
        return self._providers_snapshot

    def list_provider_names(self) -> list[str]:
        """List names of all registered providers in registration order."""
        return list(self._providers_snapshot.keys())

    def get_provider_name(self, provider: CurrencyProvider) -> str:
        """Return the name $provider is registered under.

        Raises:
            KeyError: If $provider is not registered.
        """
        with self._lock:
            if provider not in self._providers_by_name_bidict.inverse:
                raise KeyError(f"Cannot call `get_provider_name` because $provider (class {provider.__class__.__name__}) is not registered in this CurrencyRegistry")
            return self._providers_by_name_bidict.inverse[provider]

    # endregion

    # region Default chain

    def set_default_provider_chain(self, names: Iterable[str] | None) -> None:
        """Set which providers are consulted by default, and in which order.

        Names of providers that are not registered (yet) are kept and skipped until a
        provider with that name is registered.

        Args:
            names: Provider names in lookup order. None or empty restores the default:
                all providers in registration order.

        Raises:
            TypeError: If $names is a single string instead of a collection of names.
        """
        # Raise: a bare string would be split into single-character names
        if isinstance(names, str):
            raise TypeError(f"Cannot call `set_default_provider_chain` because $names must be a collection of provider names, but provided value is a single string: '{names}'")

        chain_names = tuple(names) if names is not None else ()

        with self._lock:
            unknown_names = [name for name in chain_names if name not in self._providers_by_name_bidict]
            self._default_chain_names = chain_names
            self._publish_snapshots()

        if unknown_names:
            logger.warning(f"Default provider chain refers to unregistered provider(s) {unknown_names}; they are skipped until registered")
        logger.debug(f"CurrencyRegistry default provider chain set to {list(chain_names) or 'registration order'}")

    @property
    def default_provider_chain(self) -> list[str]:
        """Get names of the providers consulted by default, in lookup order."""
        return [name for name, _ in self._default_chain]

    # endregion

    # region Queries

    def get_currency(self, code: str, *providers: str) -> Currency:
        """Return the currency with $code from the first provider that knows it.

        Args:
            code: Currency code.
            *providers: Optional provider names to consult instead of the default chain, in order.

        Returns:
            Currency: The first match.

        Raises:
            NullArgumentError: If $code is None.
            KeyError: If one of $providers is not registered.
            UnknownCurrencyError: If no consulted provider knows $code.
        """
        require_not_none(code, "code", "get_currency")
        chain = self._select_chain(providers, "get_currency")

        for _, provider in chain:
            currency = provider.get_currency(code)
            if currency is not None:
                return currency

        logger.debug(f"No CurrencyProvider knows currency code '{code}' (consulted {len(chain)} provider(s))")
        raise UnknownCurrencyError(code, [name for name, _ in chain])

    def is_currency_available(self, code: str, *providers: str) -> bool:
        """Check whether `get_currency` would succeed for $code (never raises for unknown codes)."""
        try:
            self.get_currency(code, *providers)
        except UnknownCurrencyError:
            return False
        return True

    def get_currencies(self, locale: Locale | str, *providers: str) -> list[Currency]:
        """Return all currencies known for $locale, concatenated in provider order.

        Providers that do not implement `LocaleCurrencyProvider` are skipped.

        Args:
            locale: Locale, or its string form like "zh_CN" or "_TEST1L".
            *providers: Optional provider names to consult instead of the default chain, in order.

        Returns:
            list[Currency]: Possibly empty list; an unknown locale is not an error.

        Raises:
            NullArgumentError: If $locale is None.
            KeyError: If one of $providers is not registered.
        """
        require_not_none(locale, "locale", "get_currencies")
        if isinstance(locale, str):
            locale = Locale.from_str(locale)

        result: list[Currency] = []
        for _, provider in self._select_chain(providers, "get_currencies"):
            if isinstance(provider, LocaleCurrencyProvider):
                result.extend(provider.get_currencies(locale))
        return result

    def is_currency_available_for_locale(self, locale: Locale | str, *providers: str) -> bool:
        """Check whether `get_currencies` returns at least one currency for $locale."""
        return len(self.get_currencies(locale, *providers)) > 0

    # endregion

    # region Utilities

    def _publish_snapshots(self) -> None:
        """Rebuild query snapshots from the current registrations (call under $_lock)."""
        providers_by_name = dict(self._providers_by_name_bidict)
        chain_names = self._default_chain_names or tuple(providers_by_name.keys())

        self._providers_snapshot = MappingProxyType(providers_by_name)
        self._default_chain = tuple((name, providers_by_name[name]) for name in chain_names if name in providers_by_name)

    def _select_chain(self, names: tuple[str, ...], method_name: str) -> ProviderChain:
        if not names:
            return self._default_chain

        providers_by_name = self._providers_snapshot
        for name in names:
            # Precondition: explicitly requested providers must be registered
            if name not in providers_by_name:
                raise KeyError(f"Cannot call `{method_name}` because provider name ('{name}') is not registered in this CurrencyRegistry. Registered: {list(providers_by_name.keys())}")
        return tuple((name, providers_by_name[name]) for name in names)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(providers={self.list_provider_names()})"

    # endregion


# region Process-wide registry

_registry: CurrencyRegistry | None = None
_registry_lock = Lock()


def create_default_registry(settings: RegistrySettings | None = None) -> CurrencyRegistry:
    """Create a CurrencyRegistry configured by $settings (defaults to environment settings)."""
    if settings is None:
        settings = load_registry_settings()

    registry = CurrencyRegistry()
    if settings.install_builtin_provider:
        registry.register_provider(BUILTIN_PROVIDER_NAME, create_builtin_provider())
    if settings.default_provider_chain:
        registry.set_default_provider_chain(settings.default_provider_chain)

    logger.info(f"Created CurrencyRegistry with provider(s) {registry.list_provider_names()}")
    return registry


def get_registry() -> CurrencyRegistry:
    """Get the process-wide CurrencyRegistry, creating it on first use."""
    global _registry
    registry = _registry
    if registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = create_default_registry()
            registry = _registry
    return registry


def set_registry(registry: CurrencyRegistry | None) -> None:
    """Replace the process-wide CurrencyRegistry; None makes the next use create a fresh default one."""
    global _registry
    with _registry_lock:
        _registry = registry


def register_provider(name: str, provider: CurrencyProvider) -> None:
    get_registry().register_provider(name, provider)


def unregister_provider(name: str) -> None:
    get_registry().unregister_provider(name)


def get_currency(code: str, *providers: str) -> Currency:
    return get_registry().get_currency(code, *providers)


def is_currency_available(code: str, *providers: str) -> bool:
    return get_registry().is_currency_available(code, *providers)


def get_currencies(locale: Locale | str, *providers: str) -> list[Currency]:
    return get_registry().get_currencies(locale, *providers)


def is_currency_available_for_locale(locale: Locale | str, *providers: str) -> bool:
    return get_registry().is_currency_available_for_locale(locale, *providers)


# endregion
