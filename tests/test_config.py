import pytest
from hal_resource.core.config import (
    create_transport_from_env,
    load_env_config,
    load_env_credentials,
)
from hal_resource.core.transport import DEFAULT_HEADERS, HALTransport


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "HAL_TIMEOUT_SECONDS",
        "HAL_FOLLOW_REDIRECTS",
        "HAL_USERNAME",
        "HAL_PASSWORD",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_env():
    config = load_env_config(use_dotenv=False)
    assert config.timeout_seconds == 10.0
    assert config.follow_redirects is False
    assert dict(config.headers) == dict(DEFAULT_HEADERS)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HAL_TIMEOUT_SECONDS", " 3 ")
    monkeypatch.setenv("HAL_FOLLOW_REDIRECTS", "yes")
    config = load_env_config(use_dotenv=False)
    assert config.timeout_seconds == 3.0
    assert config.follow_redirects is True


def test_unrecognised_bool_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("HAL_FOLLOW_REDIRECTS", "maybe")
    assert load_env_config(use_dotenv=False).follow_redirects is False


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_bad_timeout_raises(monkeypatch, raw):
    monkeypatch.setenv("HAL_TIMEOUT_SECONDS", raw)
    with pytest.raises(ValueError) as exc:
        load_env_config(use_dotenv=False)
    assert "HAL_TIMEOUT_SECONDS" in str(exc.value)


def test_credentials_from_env(monkeypatch):
    assert load_env_credentials(use_dotenv=False) is None

    monkeypatch.setenv("HAL_USERNAME", "erin")
    assert load_env_credentials(use_dotenv=False) == "erin:"

    monkeypatch.setenv("HAL_PASSWORD", "pw")
    assert load_env_credentials(use_dotenv=False) == "erin:pw"


def test_config_is_immutable():
    config = load_env_config(use_dotenv=False)
    with pytest.raises(AttributeError):
        config.timeout_seconds = 1.0
    with pytest.raises(TypeError):
        DEFAULT_HEADERS["Accept"] = "text/plain"


@pytest.mark.asyncio
async def test_create_transport_from_env(monkeypatch):
    monkeypatch.setenv("HAL_TIMEOUT_SECONDS", "4")
    async with create_transport_from_env() as transport:
        assert isinstance(transport, HALTransport)
        assert transport.config.timeout_seconds == 4.0
