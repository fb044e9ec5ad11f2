from unittest.mock import MagicMock

import pytest
import requests

from app.core.config import Settings
from app.factories.shopify_factory import ShopifyClientFactory
from app.services.bulk_edit import bulk_edit
from app.services.shopify import ShopifyAPIError, ShopifyClient, ShopifyNotConfiguredError


def _response(status=200, payload=None, text=""):
    r = MagicMock()
    r.ok = 200 <= status < 300
    r.status_code = status
    r.json.return_value = payload or {}
    r.text = text
    return r


def _client(session):
    return ShopifyClient("techhive.myshopify.com", "shpat_test", "2024-01", session=session)


def test_auth_headers_are_set():
    session = requests.Session()
    _client(session)
    assert session.headers["X-Shopify-Access-Token"] == "shpat_test"
    assert session.headers["Content-Type"] == "application/json"


def test_list_products():
    session = MagicMock()
    session.headers = {}
    session.request.return_value = _response(payload={"products": [{"id": 1}]})

    products = _client(session).list_products(limit=250)

    assert products == [{"id": 1}]
    session.request.assert_called_once_with(
        "GET",
        "https://techhive.myshopify.com/admin/api/2024-01/products.json",
        params={"limit": 250},
        json=None,
        timeout=None
    )


def test_update_product_wraps_body():
    session = MagicMock()
    session.headers = {}
    session.request.return_value = _response(payload={"product": {"id": 5, "title": "New"}})

    product = _client(session).update_product(5, {"title": "New"})

    assert product == {"id": 5, "title": "New"}
    args, kwargs = session.request.call_args
    assert args == ("PUT", "https://techhive.myshopify.com/admin/api/2024-01/products/5.json")
    assert kwargs["json"] == {"product": {"title": "New"}}


def test_get_product():
    session = MagicMock()
    session.headers = {}
    session.request.return_value = _response(payload={"product": {"id": 9}})

    assert _client(session).get_product(9) == {"id": 9}


def test_non_2xx_raises_with_upstream_message():
    session = MagicMock()
    session.headers = {}
    session.request.return_value = _response(status=404, text='{"errors":"Not Found"}')

    with pytest.raises(ShopifyAPIError) as exc_info:
        _client(session).get_product(1)

    assert exc_info.value.status_code == 404
    assert "Not Found" in exc_info.value.message


def test_network_error_raises():
    session = MagicMock()
    session.headers = {}
    session.request.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(ShopifyAPIError) as exc_info:
        _client(session).list_products()

    assert "connection refused" in str(exc_info.value)
    assert session.request.call_count == 1


def test_unconfigured_client_does_not_call_out():
    session = MagicMock()
    session.headers = {}
    client = ShopifyClient(None, "shpat_test", session=session)

    assert not client.is_configured
    assert client.list_products() == []
    with pytest.raises(ShopifyNotConfiguredError):
        client.update_product(1, {"title": "x"})
    session.request.assert_not_called()


def test_factory_from_settings():
    settings = Settings(
        shopify_store="shop.myshopify.com",
        shopify_access_token="token",
        shopify_request_timeout=15,
        _env_file=None
    )

    client = ShopifyClientFactory.from_settings(settings)

    assert client.is_configured
    assert client.base_url == "https://shop.myshopify.com/admin/api/2024-01"
    assert client.timeout == 15


def _html_response(status=200):
    r = requests.Response()
    r.status_code = status
    r._content = b"<html><body>Enter store password</body></html>"
    return r


def test_non_json_success_body_raises_typed_error():
    session = MagicMock()
    session.headers = {}
    session.request.return_value = _html_response()

    with pytest.raises(ShopifyAPIError) as exc_info:
        _client(session).get_product(1)

    assert exc_info.value.status_code == 200
    assert "Invalid JSON from Shopify (200)" in exc_info.value.message
    assert "store password" in exc_info.value.message


def test_bulk_edit_continues_after_non_json_response(activity_log):
    session = MagicMock()
    session.headers = {}
    session.request.side_effect = [
        _response(payload={"product": {"id": 1}}),
        _html_response(),
        _response(payload={"product": {"id": 3}}),
    ]

    response = bulk_edit(_client(session), activity_log, [1, 2, 3], {"vendor": "Acme"})

    assert response.total == 3
    assert response.successful == 2
    assert [r.status for r in response.results] == ["success", "error", "success"]
    assert response.results[1].error.startswith("Invalid JSON from Shopify")
