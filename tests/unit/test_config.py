from __future__ import annotations

from cfworkers.core.config import Settings, get_settings
from cfworkers.core.container import ClientContainer, get_container
from cfworkers.core.transport import HTTPTransport


def test_settings_defaults(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("CF_ACCOUNT_ID", "CF_API__TOKEN", "CF_API__BASE_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.base_url == "https://api.cloudflare.com/client/v4"
    assert settings.account_id == ""


def test_settings_read_nested_env(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CF_ACCOUNT_ID", "foo")
    monkeypatch.setenv("CF_API__TOKEN", "secret")
    monkeypatch.setenv("CF_API__TIMEOUT", "12")

    settings = Settings()

    assert settings.account_id == "foo"
    assert settings.api.token == "secret"
    assert settings.timeout == 12


def test_container_wires_account_id(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CF_ACCOUNT_ID", "foo")
    get_settings.cache_clear()
    get_container.cache_clear()
    try:
        container = get_container()
        assert isinstance(container, ClientContainer)
        assert isinstance(container.workers.transport, HTTPTransport)
        assert container.workers.scripts.account_id == "foo"
        assert container.workers.routes.account_id == "foo"
    finally:
        get_settings.cache_clear()
        get_container.cache_clear()
