"""
Scheduled Celery tasks for catalog automation.
"""
import logging
from typing import Any, Dict

from app.celery_app import celery_app
from app.constants.automation import ActivityAction, Routine
from app.core.dependencies import get_activity_log, get_automation_service

logger = logging.getLogger(__name__)


def run_scheduled_routine(routine: str, announcement: str) -> Dict[str, Any]:
    """
    Record the scheduled trigger, then run the routine.

    Args:
        routine: routine name from Routine
        announcement: details of the scheduled_task activity entry

    Returns:
        RoutineResult as a dict
    """
    get_activity_log().record(ActivityAction.SCHEDULED_TASK, announcement)
    logger.info(f"Scheduled run of {routine}")
    result = get_automation_service().run(routine)
    return result.model_dump()


@celery_app.task(name="app.tasks.automation_tasks.scheduled_title_optimization")
def scheduled_title_optimization() -> Dict[str, Any]:
    """Daily at 02:00."""
    return run_scheduled_routine(
        Routine.OPTIMIZE_TITLES, "Running daily title optimization"
    )


@celery_app.task(name="app.tasks.automation_tasks.scheduled_inventory_tagging")
def scheduled_inventory_tagging() -> Dict[str, Any]:
    """Every 6 hours."""
    return run_scheduled_routine(
        Routine.UPDATE_INVENTORY_TAGS, "Running inventory tag update"
    )


@celery_app.task(name="app.tasks.automation_tasks.scheduled_seo_generation")
def scheduled_seo_generation() -> Dict[str, Any]:
    """Weekly on Sunday at 03:00."""
    return run_scheduled_routine(
        Routine.GENERATE_SEO, "Running weekly SEO generation"
    )
