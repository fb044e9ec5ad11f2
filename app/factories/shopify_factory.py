"""Factory for creating Shopify API clients."""

from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.services.shopify import ShopifyClient


class ShopifyClientFactory:
    """Factory class for creating Shopify API clients."""

    @staticmethod
    def from_settings(settings: Optional[Settings] = None) -> ShopifyClient:
        """
        Create a Shopify API client from application settings.

        Args:
            settings: Settings instance (module settings if None)

        Returns:
            ShopifyClient: client, possibly unconfigured
        """
        settings = settings or default_settings
        return ShopifyClient(
            store=settings.shopify_store,
            access_token=settings.shopify_access_token,
            api_version=settings.shopify_api_version,
            timeout=settings.shopify_request_timeout
        )

