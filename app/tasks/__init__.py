"""
Celery tasks package.
"""
from app.tasks.automation_tasks import (
    scheduled_inventory_tagging,
    scheduled_seo_generation,
    scheduled_title_optimization,
)

__all__ = [
    'scheduled_inventory_tagging',
    'scheduled_seo_generation',
    'scheduled_title_optimization',
]
