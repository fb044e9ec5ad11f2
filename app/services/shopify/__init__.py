"""Shopify services package."""

from app.services.shopify.client import (
    ShopifyAPIError,
    ShopifyClient,
    ShopifyNotConfiguredError,
)

__all__ = [
    'ShopifyAPIError',
    'ShopifyClient',
    'ShopifyNotConfiguredError',
]
