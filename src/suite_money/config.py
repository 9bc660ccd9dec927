"""Settings of the process-wide currency registry, read from the environment.

Values from a `.env` file (searched from the working directory upwards, via
python-dotenv) are used as defaults; real environment variables win:

    SUITE_MONEY_INSTALL_BUILTIN_PROVIDER=false
    SUITE_MONEY_DEFAULT_PROVIDER_CHAIN=my_provider,builtin
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)

ENV_INSTALL_BUILTIN_PROVIDER = "SUITE_MONEY_INSTALL_BUILTIN_PROVIDER"
ENV_DEFAULT_PROVIDER_CHAIN = "SUITE_MONEY_DEFAULT_PROVIDER_CHAIN"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class RegistrySettings:
    """Settings used to create the process-wide `CurrencyRegistry`.

    Attributes:
        install_builtin_provider: Register the predefined ISO currencies under the name "builtin".
        default_provider_chain: Provider names consulted by default, in order. Empty means
            all registered providers in registration order.
    """

    install_builtin_provider: bool = True
    default_provider_chain: tuple[str, ...] = ()


def parse_bool(name: str, value: str) -> bool:
    """Parse a boolean environment value like "true", "0" or "off".

    Raises:
        ValueError: If $value is not a recognized boolean.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Environment variable ${name} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}, but provided value is: '{value}'")


def parse_provider_chain(value: str) -> tuple[str, ...]:
    """Split a comma-separated list of provider names, dropping blanks."""
    return tuple(name.strip() for name in value.split(",") if name.strip())


def load_registry_settings(environ: Mapping[str, str] | None = None, load_env_file: bool = True) -> RegistrySettings:
    """Read `RegistrySettings` from $environ (defaults to `os.environ`).

    Args:
        environ: Mapping to read from. None means `os.environ`.
        load_env_file: Use values of a `.env` file as defaults ($environ wins).
            `os.environ` itself is never modified.

    Returns:
        RegistrySettings: Settings with defaults for missing variables.

    Raises:
        ValueError: If a variable has an invalid value.
    """
    values: dict[str, str] = {}
    if load_env_file:
        env_path = find_dotenv(usecwd=True)
        if env_path:
            values.update({key: value for key, value in dotenv_values(env_path).items() if value is not None})
            logger.debug(f"Read settings defaults from '{env_path}'")

    values.update(os.environ if environ is None else environ)
    environ = values

    settings = RegistrySettings()

    install_builtin_provider = settings.install_builtin_provider
    raw_install = environ.get(ENV_INSTALL_BUILTIN_PROVIDER)
    if raw_install is not None and raw_install.strip():
        install_builtin_provider = parse_bool(ENV_INSTALL_BUILTIN_PROVIDER, raw_install)

    default_provider_chain = settings.default_provider_chain
    raw_chain = environ.get(ENV_DEFAULT_PROVIDER_CHAIN)
    if raw_chain is not None:
        default_provider_chain = parse_provider_chain(raw_chain)

    result = RegistrySettings(install_builtin_provider=install_builtin_provider, default_provider_chain=default_provider_chain)
    logger.debug(f"Loaded registry settings: {result}")
    return result
