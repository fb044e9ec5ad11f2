import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from app.constants.automation import ActivityAction, ActivityStatus
from app.core.dependencies import get_activity_log, get_settings, get_shopify_client
from app.core.config import Settings
from app.schemas.products import BulkEditRequest, BulkEditResponse
from app.services.activity_log import ActivityLog
from app.services.bulk_edit import bulk_edit
from app.services.shopify import ShopifyAPIError, ShopifyClient

router = APIRouter(tags=["products"])

_logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = (
    "Shopify not configured. Set SHOPIFY_STORE and SHOPIFY_ACCESS_TOKEN env vars."
)


@router.get("/products")
def list_products(
    client: ShopifyClient = Depends(get_shopify_client),
    activity_log: ActivityLog = Depends(get_activity_log),
    settings: Settings = Depends(get_settings)
):
    if not client.is_configured:
        return {"message": NOT_CONFIGURED_MESSAGE, "products": []}
    try:
        products = client.list_products(limit=settings.product_page_limit)
    except ShopifyAPIError as e:
        activity_log.record(ActivityAction.FETCH_PRODUCTS, e.message, ActivityStatus.ERROR)
        raise HTTPException(status_code=500, detail=e.message)
    activity_log.record(ActivityAction.FETCH_PRODUCTS, f"Fetched {len(products)} products")
    return {"products": products}


@router.get("/products/{product_id}")
def get_product(product_id: str, client: ShopifyClient = Depends(get_shopify_client)):
    try:
        return {"product": client.get_product(product_id)}
    except ShopifyAPIError as e:
        raise HTTPException(status_code=500, detail=e.message)


@router.put("/products/{product_id}")
def update_product(
    product_id: str,
    fields: Dict[str, Any] = Body(...),
    client: ShopifyClient = Depends(get_shopify_client),
    activity_log: ActivityLog = Depends(get_activity_log)
):
    try:
        product = client.update_product(product_id, fields)
    except ShopifyAPIError as e:
        activity_log.record(ActivityAction.UPDATE_PRODUCT, e.message, ActivityStatus.ERROR)
        raise HTTPException(status_code=500, detail=e.message)
    activity_log.record(ActivityAction.UPDATE_PRODUCT, f"Updated product {product_id}")
    return {"product": product}


@router.post("/bulk-edit", response_model=BulkEditResponse, response_model_exclude_none=True)
def bulk_edit_products(
    body: BulkEditRequest,
    client: ShopifyClient = Depends(get_shopify_client),
    activity_log: ActivityLog = Depends(get_activity_log)
):
    """
    Apply the same partial update to every listed product.

    Failures are reported per product and never abort the batch.
    """
    _logger.info(f"Bulk edit of {len(body.product_ids)} products")
    return bulk_edit(client, activity_log, body.product_ids, body.updates)
