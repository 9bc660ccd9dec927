import pytest

from suite_money.config import (
    ENV_DEFAULT_PROVIDER_CHAIN,
    ENV_INSTALL_BUILTIN_PROVIDER,
    RegistrySettings,
    load_registry_settings,
    parse_bool,
    parse_provider_chain,
)


def test_defaults_when_environment_is_empty():
    settings = load_registry_settings(environ={}, load_env_file=False)

    assert settings == RegistrySettings(install_builtin_provider=True, default_provider_chain=())


def test_reads_values_from_environment():
    environ = {
        ENV_INSTALL_BUILTIN_PROVIDER: "off",
        ENV_DEFAULT_PROVIDER_CHAIN: " custom , builtin,, ",
    }

    settings = load_registry_settings(environ=environ, load_env_file=False)

    assert settings.install_builtin_provider is False
    assert settings.default_provider_chain == ("custom", "builtin")


def test_reads_values_from_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV_INSTALL_BUILTIN_PROVIDER, raising=False)
    monkeypatch.delenv(ENV_DEFAULT_PROVIDER_CHAIN, raising=False)
    (tmp_path / ".env").write_text(f"{ENV_INSTALL_BUILTIN_PROVIDER}=no\n{ENV_DEFAULT_PROVIDER_CHAIN}=from_file\n")
    monkeypatch.chdir(tmp_path)

    settings = load_registry_settings()

    assert settings.install_builtin_provider is False
    assert settings.default_provider_chain == ("from_file",)


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_INSTALL_BUILTIN_PROVIDER, "yes")
    (tmp_path / ".env").write_text(f"{ENV_INSTALL_BUILTIN_PROVIDER}=no\n")
    monkeypatch.chdir(tmp_path)

    assert load_registry_settings().install_builtin_provider is True


@pytest.mark.parametrize("value, expected", [("1", True), ("TRUE", True), ("yes", True), (" on ", True), ("0", False), ("False", False), ("no", False), ("off", False)])
def test_parse_bool(value, expected):
    assert parse_bool("NAME", value) is expected


def test_parse_bool_rejects_unknown_value():
    with pytest.raises(ValueError, match="\\$NAME"):
        parse_bool("NAME", "maybe")


def test_parse_provider_chain():
    assert parse_provider_chain("") == ()
    assert parse_provider_chain("a,b") == ("a", "b")
