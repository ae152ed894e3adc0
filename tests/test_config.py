"""
配置（Settings）测试
"""
import pytest
from pydantic import ValidationError

from ozon_seller.config import DEFAULT_API_BASE_URL, Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CLIENT_ID", "API_KEY", "BASE_URL", "TIMEOUT", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"OZON__{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.base_url == DEFAULT_API_BASE_URL
    assert settings.timeout == 30.0
    assert settings.log_format == "json"
    assert not settings.has_credentials


def test_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("OZON__CLIENT_ID", "123456")
    monkeypatch.setenv("OZON__API_KEY", "env-key")
    monkeypatch.setenv("OZON__TIMEOUT", "12.5")

    settings = get_settings()

    assert settings.client_id == "123456"
    assert settings.api_key == "env-key"
    assert settings.timeout == 12.5
    assert settings.has_credentials
    assert get_settings() is settings


def test_unprefixed_env_is_ignored(monkeypatch):
    monkeypatch.setenv("CLIENT_ID", "should-not-be-used")

    assert Settings(_env_file=None).client_id == ""


def test_base_url_trailing_slash_is_stripped():
    assert Settings(base_url="https://api-seller.ozon.ru/", _env_file=None).base_url == "https://api-seller.ozon.ru"


def test_base_url_requires_http_scheme():
    with pytest.raises(ValidationError):
        Settings(base_url="api-seller.ozon.ru", _env_file=None)


def test_log_format_is_validated():
    assert Settings(log_format="text", _env_file=None).log_format == "text"

    with pytest.raises(ValidationError):
        Settings(log_format="xml", _env_file=None)


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(timeout=0, _env_file=None)


def test_log_level_is_normalized_and_validated(monkeypatch):
    assert Settings(log_level="debug", _env_file=None).log_level == "DEBUG"

    monkeypatch.setenv("OZON__LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
