"""
Manual triggers for the catalog automation routines.

Every trigger responds immediately; the routine runs afterwards as a
background task.
"""
from fastapi import APIRouter, BackgroundTasks, Depends

from app.constants.automation import ActivityAction
from app.core.dependencies import get_activity_log, get_automation_service
from app.schemas.activity import ActivityLogResponse
from app.services.activity_log import ActivityLog
from app.services.automation import AutomationService

router = APIRouter(prefix="/automation", tags=["automation"])


@router.post("/optimize-titles")
def trigger_optimize_titles(
    background: BackgroundTasks,
    service: AutomationService = Depends(get_automation_service)
):
    background.add_task(service.optimize_titles)
    return {"message": "Title optimization started"}


@router.post("/update-inventory-tags")
def trigger_update_inventory_tags(
    background: BackgroundTasks,
    service: AutomationService = Depends(get_automation_service)
):
    background.add_task(service.update_inventory_tags)
    return {"message": "Inventory tag update started"}


@router.post("/generate-seo")
def trigger_generate_seo(
    background: BackgroundTasks,
    service: AutomationService = Depends(get_automation_service)
):
    background.add_task(service.generate_seo_descriptions)
    return {"message": "SEO generation started"}


@router.post("/run-all")
def trigger_run_all(
    background: BackgroundTasks,
    service: AutomationService = Depends(get_automation_service),
    activity_log: ActivityLog = Depends(get_activity_log)
):
    activity_log.record(ActivityAction.MANUAL_TRIGGER, "Running all automation tasks")
    background.add_task(service.optimize_titles)
    background.add_task(service.update_inventory_tags)
    background.add_task(service.generate_seo_descriptions)
    return {"message": "All automation tasks started"}


@router.get("/logs", response_model=ActivityLogResponse)
def get_logs(activity_log: ActivityLog = Depends(get_activity_log)):
    return ActivityLogResponse(logs=activity_log.list())
