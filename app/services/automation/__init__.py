"""Catalog automation package."""

from app.services.automation.guard import RoutineGuard
from app.services.automation.routines import AutomationService
from app.services.automation.transforms import (
    build_seo_description,
    compute_inventory_tags,
    needs_seo_description,
    optimize_title,
    stock_tag,
    total_inventory,
)

__all__ = [
    'AutomationService',
    'RoutineGuard',
    'build_seo_description',
    'compute_inventory_tags',
    'needs_seo_description',
    'optimize_title',
    'stock_tag',
    'total_inventory',
]
