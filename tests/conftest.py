from typing import Any, Dict, List, Optional, Set

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.dependencies import (
    get_activity_log,
    get_automation_service,
    get_settings,
    get_shopify_client,
)
from app.main import app
from app.services.activity_log import ActivityLog
from app.services.automation import AutomationService
from app.services.shopify import ShopifyAPIError, ShopifyNotConfiguredError


class FakeShopifyClient:
    """In-memory stand-in for ShopifyClient."""

    def __init__(
        self,
        products: Optional[List[Dict[str, Any]]] = None,
        configured: bool = True,
        failing_ids: Optional[Set[Any]] = None,
        list_error: Optional[Exception] = None
    ):
        self.products = {p["id"]: dict(p) for p in (products or [])}
        self.configured = configured
        self.failing_ids = failing_ids or set()
        self.list_error = list_error
        self.updates: List[tuple] = []
        self.list_calls = 0

    @property
    def is_configured(self) -> bool:
        return self.configured

    def list_products(self, limit: int = 250) -> List[Dict[str, Any]]:
        self.list_calls += 1
        if not self.configured:
            return []
        if self.list_error:
            raise self.list_error
        return [dict(p) for p in list(self.products.values())[:limit]]

    def get_product(self, product_id):
        if not self.configured:
            raise ShopifyNotConfiguredError()
        product = self.products.get(_coerce(product_id))
        if product is None:
            raise ShopifyAPIError("Shopify API error (404): Not Found", status_code=404)
        return dict(product)

    def update_product(self, product_id, fields):
        if not self.configured:
            raise ShopifyNotConfiguredError()
        key = _coerce(product_id)
        if key in self.failing_ids or product_id in self.failing_ids:
            raise ShopifyAPIError(
                f"Shopify API error (422): product {product_id} rejected",
                status_code=422
            )
        self.updates.append((product_id, dict(fields)))
        product = self.products.setdefault(key, {"id": key})
        product.update(fields)
        return dict(product)


def _coerce(product_id):
    try:
        return int(product_id)
    except (TypeError, ValueError):
        return product_id


@pytest.fixture
def settings():
    return Settings(
        shopify_store="techhive.myshopify.com",
        shopify_access_token="shpat_test",
        _env_file=None
    )


@pytest.fixture
def activity_log():
    return ActivityLog(capacity=100)


@pytest.fixture
def fake_client():
    return FakeShopifyClient()


@pytest.fixture
def service(fake_client, activity_log, settings):
    return AutomationService(fake_client, activity_log, settings=settings)


@pytest.fixture
def api(fake_client, activity_log, settings, service):
    app.dependency_overrides[get_shopify_client] = lambda: fake_client
    app.dependency_overrides[get_activity_log] = lambda: activity_log
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_automation_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
