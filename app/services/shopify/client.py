"""Shopify Admin API client utilities."""

import logging
from typing import Any, Dict, List, Optional

import requests

from app.schemas.products import ProductId

__logger__ = logging.getLogger(__name__)


class ShopifyAPIError(Exception):
    """Raised when a Shopify call fails (network error or non-2xx response)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ShopifyNotConfiguredError(ShopifyAPIError):
    """Raised when a call needs credentials that are not configured."""

    def __init__(self):
        super().__init__(
            "Shopify not configured. Set SHOPIFY_STORE and SHOPIFY_ACCESS_TOKEN env vars."
        )


class ShopifyClient:
    """
    Thin authenticated client for the Shopify Admin REST API.

    Every call is a single synchronous request. Failures are raised as
    ShopifyAPIError and are never retried.
    """

    def __init__(
        self,
        store: Optional[str],
        access_token: Optional[str],
        api_version: str = "2024-01",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.store = store
        self.access_token = access_token
        self.api_version = api_version
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "X-Shopify-Access-Token": access_token or "",
            "Content-Type": "application/json",
        })

    @property
    def is_configured(self) -> bool:
        return bool(self.store and self.access_token)

    @property
    def base_url(self) -> str:
        return f"https://{self.store}/admin/api/{self.api_version}"

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> Any:
        if not self.is_configured:
            raise ShopifyNotConfiguredError()

        url = f"{self.base_url}{path}"
        __logger__.debug(f"Shopify request: {method} {path} params={params}")
        try:
            r = self.session.request(
                method, url, params=params, json=json, timeout=self.timeout
            )
        except requests.RequestException as e:
            __logger__.error(f"Shopify {method} {path} failed: {e}")
            raise ShopifyAPIError(str(e)) from e

        if not r.ok:
            __logger__.error(f"Shopify {method} error on {path}: {r.status_code} - {r.text}")
            raise ShopifyAPIError(
                f"Shopify API error ({r.status_code}): {r.text}",
                status_code=r.status_code
            )
        try:
            return r.json()
        except ValueError as e:
            __logger__.error(f"Shopify {method} {path} returned invalid JSON: {r.status_code}")
            raise ShopifyAPIError(
                f"Invalid JSON from Shopify ({r.status_code}): {r.text[:200]}",
                status_code=r.status_code
            ) from e

    def list_products(self, limit: int = 250) -> List[Dict[str, Any]]:
        """
        Fetch a single page of products.

        Returns an empty list without calling out when credentials are
        missing.
        """
        if not self.is_configured:
            __logger__.info("Shopify not configured, skipping product listing")
            return []
        data = self._request("GET", "/products.json", params={"limit": limit})
        return data.get("products", [])

    def get_product(self, product_id: ProductId) -> Dict[str, Any]:
        data = self._request("GET", f"/products/{product_id}.json")
        return data.get("product", data)

    def update_product(self, product_id: ProductId, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Send a partial update; only the given fields are changed upstream."""
        data = self._request(
            "PUT", f"/products/{product_id}.json", json={"product": fields}
        )
        return data.get("product", data)
