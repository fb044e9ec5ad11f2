"""
Catalog automation routines.

Each routine reads one page of products, computes a new value per product and
writes it back when it changed. Outcomes go to the activity log.
"""
import logging
from typing import Callable, List, Optional

from app.constants.automation import ActivityAction, ActivityStatus, Routine
from app.core.config import Settings, settings as default_settings
from app.schemas.activity import RoutineResult
from app.schemas.products import ShopifyProduct
from app.services.activity_log import ActivityLog
from app.services.automation.guard import RoutineGuard
from app.services.automation.transforms import (
    build_seo_description,
    compute_inventory_tags,
    needs_seo_description,
    optimize_title,
    total_inventory,
)
from app.services.shopify import ShopifyClient

logger = logging.getLogger(__name__)


class AutomationService:
    """Runs the title, inventory tag and SEO routines against one catalog."""

    def __init__(
        self,
        client: ShopifyClient,
        activity_log: ActivityLog,
        settings: Optional[Settings] = None,
        guard: Optional[RoutineGuard] = None
    ):
        self.client = client
        self.activity_log = activity_log
        self.settings = settings or default_settings
        self.guard = guard or RoutineGuard()

    # ==================== Routines ====================

    def optimize_titles(self) -> RoutineResult:
        def process(product: ShopifyProduct) -> bool:
            original = product.title or ""
            optimized = optimize_title(original)
            if original == optimized:
                return False
            self.client.update_product(product.id, {"title": optimized})
            self.activity_log.record(
                ActivityAction.AUTO_OPTIMIZE_TITLE, f"{original} -> {optimized}"
            )
            return True

        return self._run(
            Routine.OPTIMIZE_TITLES,
            process,
            error_action=ActivityAction.TITLE_OPTIMIZATION,
            complete_action=ActivityAction.TITLE_OPTIMIZATION_COMPLETE,
            summary="Optimized {count} product titles"
        )

    def update_inventory_tags(self) -> RoutineResult:
        def process(product: ShopifyProduct) -> bool:
            updated_tags = compute_inventory_tags(
                product.tags, total_inventory(product.variants)
            )
            if (product.tags or "") == updated_tags:
                return False
            self.client.update_product(product.id, {"tags": updated_tags})
            self.activity_log.record(
                ActivityAction.AUTO_INVENTORY_TAG, f"Product {product.id}: {updated_tags}"
            )
            return True

        return self._run(
            Routine.UPDATE_INVENTORY_TAGS,
            process,
            error_action=ActivityAction.INVENTORY_TAGGING,
            complete_action=ActivityAction.INVENTORY_TAGGING_COMPLETE,
            summary="Updated {count} product tags"
        )

    def generate_seo_descriptions(self) -> RoutineResult:
        def process(product: ShopifyProduct) -> bool:
            if not needs_seo_description(product.body_html):
                return False
            description = build_seo_description(
                product.title or "",
                product.product_type,
                product.vendor,
                store_name=self.settings.store_name
            )
            self.client.update_product(product.id, {"body_html": description})
            self.activity_log.record(
                ActivityAction.AUTO_SEO, f"Generated description for {product.title}"
            )
            return True

        return self._run(
            Routine.GENERATE_SEO,
            process,
            error_action=ActivityAction.SEO_GENERATION,
            complete_action=ActivityAction.SEO_GENERATION_COMPLETE,
            summary="Generated {count} SEO descriptions"
        )

    def run_all(self) -> List[RoutineResult]:
        return [
            self.optimize_titles(),
            self.update_inventory_tags(),
            self.generate_seo_descriptions(),
        ]

    def run(self, routine: str) -> RoutineResult:
        """Run a routine by name."""
        runners = {
            Routine.OPTIMIZE_TITLES: self.optimize_titles,
            Routine.UPDATE_INVENTORY_TAGS: self.update_inventory_tags,
            Routine.GENERATE_SEO: self.generate_seo_descriptions,
        }
        if routine not in runners:
            raise ValueError(f"Unknown routine: {routine}")
        return runners[routine]()

    # ==================== Helpers ====================

    def _run(
        self,
        routine: str,
        process: Callable[[ShopifyProduct], bool],
        error_action: str,
        complete_action: str,
        summary: str
    ) -> RoutineResult:
        result = RoutineResult(routine=routine)

        if not self.client.is_configured:
            logger.info(f"Shopify not configured, skipping {routine}")
            result.skipped = True
            return result

        with self.guard.hold(routine) as acquired:
            if not acquired:
                self.activity_log.record(
                    f"{routine}_skipped", f"{routine} is already running"
                )
                result.skipped = True
                return result

            try:
                raw_products = self.client.list_products(
                    limit=self.settings.product_page_limit
                )
            except Exception as e:
                logger.error(f"Error fetching products for {routine}: {e}", exc_info=True)
                self.activity_log.record(error_action, str(e), ActivityStatus.ERROR)
                result.skipped = True
                return result

            for raw in raw_products:
                result.processed += 1
                product_id = raw.get("id") if isinstance(raw, dict) else None
                try:
                    if process(ShopifyProduct(**raw)):
                        result.changed += 1
                except Exception as e:
                    result.failed += 1
                    logger.error(f"Error in {routine} for product {product_id}: {e}")
                    self.activity_log.record(
                        error_action,
                        f"Failed to update product {product_id}: {e}",
                        ActivityStatus.ERROR
                    )

            self.activity_log.record(
                complete_action, summary.format(count=result.changed)
            )
            logger.info(
                f"{routine} completed: {result.processed} processed, "
                f"{result.changed} changed, {result.failed} errors"
            )
            return result
