from unittest.mock import MagicMock

import pytest

from app.celery_app import celery_app
from app.tasks import automation_tasks
from app.schemas.activity import RoutineResult


def test_beat_schedule_entries():
    schedule = celery_app.conf.beat_schedule

    title = schedule["title-optimization-daily"]["schedule"]
    assert title.hour == {2}
    assert title.minute == {0}

    inventory = schedule["inventory-tagging-every-6-hours"]["schedule"]
    assert inventory.hour == {0, 6, 12, 18}
    assert inventory.minute == {0}

    seo = schedule["seo-generation-weekly"]["schedule"]
    assert seo.hour == {3}
    assert seo.day_of_week == {0}


def test_beat_schedule_tasks_are_registered():
    for entry in celery_app.conf.beat_schedule.values():
        assert entry["task"] in celery_app.tasks


@pytest.mark.parametrize("task,routine,announcement", [
    (automation_tasks.scheduled_title_optimization, "title_optimization",
     "Running daily title optimization"),
    (automation_tasks.scheduled_inventory_tagging, "inventory_tagging",
     "Running inventory tag update"),
    (automation_tasks.scheduled_seo_generation, "seo_generation",
     "Running weekly SEO generation"),
])
def test_scheduled_task_logs_then_runs(monkeypatch, activity_log, task, routine, announcement):
    service = MagicMock()
    service.run.return_value = RoutineResult(routine=routine, processed=3, changed=1)
    monkeypatch.setattr(automation_tasks, "get_activity_log", lambda: activity_log)
    monkeypatch.setattr(automation_tasks, "get_automation_service", lambda: service)

    result = task.run()

    service.run.assert_called_once_with(routine)
    entry = activity_log.list()[0]
    assert entry.action == "scheduled_task"
    assert entry.details == announcement
    assert result["changed"] == 1
