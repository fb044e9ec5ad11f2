"""Constants for catalog automation."""


class ActivityStatus:
    """Activity log entry status constants."""
    SUCCESS = "success"
    ERROR = "error"


class ActivityAction:
    """Activity log action tags."""
    SERVER_START = "server_start"
    FETCH_PRODUCTS = "fetch_products"
    UPDATE_PRODUCT = "update_product"
    BULK_UPDATE = "bulk_update"
    MANUAL_TRIGGER = "manual_trigger"
    SCHEDULED_TASK = "scheduled_task"

    AUTO_OPTIMIZE_TITLE = "auto_optimize_title"
    TITLE_OPTIMIZATION = "title_optimization"
    TITLE_OPTIMIZATION_COMPLETE = "title_optimization_complete"

    AUTO_INVENTORY_TAG = "auto_inventory_tag"
    INVENTORY_TAGGING = "inventory_tagging"
    INVENTORY_TAGGING_COMPLETE = "inventory_tagging_complete"

    AUTO_SEO = "auto_seo"
    SEO_GENERATION = "seo_generation"
    SEO_GENERATION_COMPLETE = "seo_generation_complete"


class StockTag:
    """Inventory status tags."""
    PREFIX = "stock-"
    OUT = "stock-out"
    LOW = "stock-low"
    AVAILABLE = "stock-available"

    LOW_STOCK_THRESHOLD = 10


class Routine:
    """Automation routine names."""
    OPTIMIZE_TITLES = "title_optimization"
    UPDATE_INVENTORY_TAGS = "inventory_tagging"
    GENERATE_SEO = "seo_generation"

    ALL = (OPTIMIZE_TITLES, UPDATE_INVENTORY_TAGS, GENERATE_SEO)


SEO_MIN_DESCRIPTION_LENGTH = 50
SEO_SUFFIX = "Fast shipping and great prices!"

# Human readable schedule, mirrored by the beat schedule in app.celery_app
SCHEDULE_DESCRIPTIONS = {
    "titleOptimization": "Daily at 2:00 AM",
    "inventoryTagging": "Every 6 hours",
    "seoGeneration": "Weekly on Sunday at 3:00 AM",
}
