"""Apply one partial update to many products."""

import logging
from typing import Any, Dict, List

from app.constants.automation import ActivityAction, ActivityStatus
from app.schemas.products import BulkEditResponse, BulkEditResult, ProductId
from app.services.activity_log import ActivityLog
from app.services.shopify import ShopifyAPIError, ShopifyClient

__logger__ = logging.getLogger(__name__)


def bulk_edit(
    client: ShopifyClient,
    activity_log: ActivityLog,
    product_ids: List[ProductId],
    updates: Dict[str, Any]
) -> BulkEditResponse:
    """
    Send the same update to every product in ``product_ids``.

    A failing product is recorded and skipped; the remaining ids are still
    processed.

    Args:
        client: Shopify client
        activity_log: log receiving one entry per product
        product_ids: ids to update, processed in order
        updates: partial product fields

    Returns:
        BulkEditResponse with one result per id
    """
    results: List[BulkEditResult] = []

    for product_id in product_ids:
        try:
            client.update_product(product_id, updates)
            results.append(BulkEditResult(id=product_id, status=ActivityStatus.SUCCESS))
            activity_log.record(ActivityAction.BULK_UPDATE, f"Updated product {product_id}")
        except ShopifyAPIError as e:
            __logger__.warning(f"Bulk edit failed for product {product_id}: {e.message}")
            results.append(BulkEditResult(
                id=product_id, status=ActivityStatus.ERROR, error=e.message
            ))
            activity_log.record(
                ActivityAction.BULK_UPDATE,
                f"Failed to update {product_id}: {e.message}",
                ActivityStatus.ERROR
            )

    successful = sum(1 for r in results if r.status == ActivityStatus.SUCCESS)
    return BulkEditResponse(results=results, total=len(product_ids), successful=successful)
