from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


ProductId = Union[int, str]


class ShopifyVariant(BaseModel):
    """Variant fields consumed by the automation routines."""
    model_config = ConfigDict(extra="allow")

    id: Optional[ProductId] = None
    inventory_quantity: Optional[int] = None


class ShopifyProduct(BaseModel):
    """Cached view of a Shopify product, fetched fresh on every run."""
    model_config = ConfigDict(extra="allow")

    id: ProductId
    title: Optional[str] = None
    tags: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    variants: List[ShopifyVariant] = Field(default_factory=list)


class BulkEditRequest(BaseModel):
    """Shared partial update applied to every listed product"""
    model_config = ConfigDict(populate_by_name=True)

    product_ids: List[ProductId] = Field(default_factory=list, alias="productIds")
    updates: Dict[str, Any] = Field(default_factory=dict)


class BulkEditResult(BaseModel):
    id: ProductId
    status: str
    error: Optional[str] = None


class BulkEditResponse(BaseModel):
    results: List[BulkEditResult]
    total: int
    successful: int
