from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.constants.automation import SCHEDULE_DESCRIPTIONS
from app.core.config import Settings
from app.core.dependencies import get_settings

router = APIRouter(tags=["system"])

APP_NAME = "TechHive Automation"
APP_VERSION = "2.0.0"
APP_DESCRIPTION = "Fully autonomous Shopify product optimizer"

ENDPOINTS = {
    "products": {
        "list": "GET /api/products",
        "get": "GET /api/products/:id",
        "update": "PUT /api/products/:id",
        "bulkEdit": "POST /api/bulk-edit",
    },
    "automation": {
        "optimizeTitles": "POST /api/automation/optimize-titles",
        "updateInventoryTags": "POST /api/automation/update-inventory-tags",
        "generateSEO": "POST /api/automation/generate-seo",
        "runAll": "POST /api/automation/run-all",
        "logs": "GET /api/automation/logs",
    },
    "system": {
        "health": "GET /health",
    },
}


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "shopifyConfigured": settings.shopify_configured,
    }


@router.get("/")
def root(settings: Settings = Depends(get_settings)):
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "description": APP_DESCRIPTION,
        "shopifyConfigured": settings.shopify_configured,
        "endpoints": ENDPOINTS,
        "scheduledTasks": SCHEDULE_DESCRIPTIONS,
    }
