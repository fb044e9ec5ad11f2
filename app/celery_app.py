"""
Celery application configuration for the catalog automation scheduler.

Run the scheduler with ``celery -A app.celery_app beat`` and a worker with
``celery -A app.celery_app worker -Q scheduler_queue``.
"""
from celery import Celery
from celery.schedules import crontab

from app.core.config import settings

# Create Celery instance
celery_app = Celery(
    "techhive_automation",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=[
        "app.tasks.automation_tasks",
    ]
)

celery_app.conf.update(
    # Serialization
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],

    # Timezone of the crontab schedule
    timezone=settings.celery_timezone,
    enable_utc=True,

    # Task execution
    task_track_started=True,
    task_acks_late=True,

    result_expires=7200,  # Keep results for 2 hours

    task_routes={
        'app.tasks.automation_tasks.*': {
            'queue': 'scheduler_queue',
        },
    },

    broker_connection_retry_on_startup=True,
)

# Missed runs are not caught up: beat only fires schedules that are due now
celery_app.conf.beat_schedule = {
    'title-optimization-daily': {
        'task': 'app.tasks.automation_tasks.scheduled_title_optimization',
        'schedule': crontab(minute=0, hour=2),
    },
    'inventory-tagging-every-6-hours': {
        'task': 'app.tasks.automation_tasks.scheduled_inventory_tagging',
        'schedule': crontab(minute=0, hour='*/6'),
    },
    'seo-generation-weekly': {
        'task': 'app.tasks.automation_tasks.scheduled_seo_generation',
        'schedule': crontab(minute=0, hour=3, day_of_week=0),
    },
}

if __name__ == '__main__':
    celery_app.start()
