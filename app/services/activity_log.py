"""
Bounded activity log.

Keeps the most recent automation events, newest first. Every entry is also
written to the application logger.
"""
import json
import logging
import threading
from collections import deque
from datetime import datetime, timezone
from typing import List

import redis

from app.constants.automation import ActivityStatus
from app.schemas.activity import ActivityLogEntry

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


def _emit(entry: ActivityLogEntry) -> None:
    level = logging.ERROR if entry.status == ActivityStatus.ERROR else logging.INFO
    logger.log(level, f"[{entry.status.upper()}] {entry.action}: {entry.details}")


def _new_entry(action: str, details: str, status: str) -> ActivityLogEntry:
    return ActivityLogEntry(
        timestamp=datetime.now(timezone.utc),
        action=action,
        details=details,
        status=status
    )


class ActivityLog:
    """In-process ring buffer. Reset when the process restarts."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.capacity = capacity
        self._entries = deque(maxlen=capacity)
        # routines run on the thread pool, append and eviction must be atomic
        self._lock = threading.Lock()

    def record(
        self,
        action: str,
        details: str,
        status: str = ActivityStatus.SUCCESS
    ) -> ActivityLogEntry:
        entry = _new_entry(action, details, status)
        with self._lock:
            self._entries.appendleft(entry)
        _emit(entry)
        return entry

    def list(self) -> List[ActivityLogEntry]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class RedisActivityLog:
    """
    Activity log stored in a Redis list.

    Lets the API process and the Celery worker share one log. LPUSH and LTRIM
    are sent in a single transaction so the list never exceeds capacity.
    """

    def __init__(
        self,
        client: redis.Redis,
        capacity: int = DEFAULT_CAPACITY,
        key: str = "techhive:activity_log"
    ):
        self.client = client
        self.capacity = capacity
        self.key = key

    def record(
        self,
        action: str,
        details: str,
        status: str = ActivityStatus.SUCCESS
    ) -> ActivityLogEntry:
        entry = _new_entry(action, details, status)
        pipe = self.client.pipeline(transaction=True)
        pipe.lpush(self.key, entry.model_dump_json())
        pipe.ltrim(self.key, 0, self.capacity - 1)
        pipe.execute()
        _emit(entry)
        return entry

    def list(self) -> List[ActivityLogEntry]:
        raw = self.client.lrange(self.key, 0, self.capacity - 1)
        return [ActivityLogEntry(**json.loads(item)) for item in raw]

    def clear(self) -> None:
        self.client.delete(self.key)

    def __len__(self) -> int:
        return self.client.llen(self.key)
