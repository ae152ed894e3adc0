"""
客户端门面（OzonClient）测试
"""
import httpx
import pytest

from ozon_seller import ConfigurationError, OzonClient, Settings, new_client, new_mock_client
from ozon_seller.api.base import APIGroup
from ozon_seller.api.endpoints import Finance, Products

ACCESSORS = [
    "analytics",
    "fbo",
    "fbs",
    "finance",
    "products",
    "promotions",
    "rating",
    "warehouses",
    "returns",
    "reports",
    "cancellations",
    "categories",
    "polygons",
    "invoices",
    "brands",
    "chats",
    "certificates",
    "strategies",
    "barcodes",
]


def test_all_groups_share_one_core(client):
    groups = [getattr(client, name) for name in ACCESSORS]

    assert all(isinstance(group, APIGroup) for group in groups)
    assert all(group._client is client.core for group in groups)
    assert len({id(group) for group in groups}) == len(ACCESSORS)


def test_accessors_return_same_instance(client):
    assert client.finance is client.finance
    assert isinstance(client.finance, Finance)
    assert isinstance(client.products, Products)


def test_accessors_are_read_only(client):
    with pytest.raises(AttributeError):
        client.finance = None


def test_mock_and_real_clients_have_same_shape():
    real = new_client("1", "k", transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
    mock = new_mock_client(lambda request: httpx.Response(200, json={}))

    for name in ACCESSORS:
        assert type(getattr(real, name)) is type(getattr(mock, name))

    real.close()
    mock.close()


def test_context_manager_closes_transport():
    with new_mock_client(lambda request: httpx.Response(200, json={})) as client:
        http_client = client.core.http_client
        assert not http_client.is_closed

    assert http_client.is_closed


def test_from_settings_requires_credentials():
    with pytest.raises(ConfigurationError):
        OzonClient.from_settings(Settings(client_id="", api_key=""))


def test_from_settings_uses_configured_values():
    settings = Settings(
        client_id="777",
        api_key="settings-key",
        base_url="https://sandbox.example.com/",
        timeout=5,
    )

    with OzonClient.from_settings(settings) as client:
        http_client = client.core.http_client
        assert client.core.base_url == "https://sandbox.example.com"
        assert http_client.headers["Client-Id"] == "777"
        assert http_client.headers["Api-Key"] == "settings-key"
        assert http_client.timeout.read == 5


def test_repr_does_not_leak_credentials():
    with new_client("1", "very-secret", transport=httpx.MockTransport(lambda r: httpx.Response(200))) as client:
        assert "very-secret" not in repr(client.finance)
        assert "api-seller.ozon.ru" in repr(client.finance)
