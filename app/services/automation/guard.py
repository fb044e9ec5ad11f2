"""Per-routine mutual exclusion."""

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

import redis
from redis.lock import Lock as RedisLock

from app.constants.automation import Routine

logger = logging.getLogger(__name__)


class RoutineGuard:
    """
    Prevents two runs of the same routine from overlapping.

    Uses a process-local lock, or a Redis lock when a client is given so the
    API process and Celery workers share the guard.
    """

    def __init__(
        self,
        redis_client: Optional[redis.Redis] = None,
        lock_timeout: int = 1800
    ):
        self.redis_client = redis_client
        self.lock_timeout = lock_timeout
        self._locks: Dict[str, threading.Lock] = {
            name: threading.Lock() for name in Routine.ALL
        }
        self._registry_lock = threading.Lock()

    def _local_lock(self, routine: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks.setdefault(routine, threading.Lock())

    @contextmanager
    def hold(self, routine: str) -> Iterator[bool]:
        """Yield True if the guard was acquired, False if the routine is busy."""
        if self.redis_client is not None:
            lock = RedisLock(
                self.redis_client,
                f"techhive:routine:{routine}",
                timeout=self.lock_timeout
            )
            acquired = lock.acquire(blocking=False)
            try:
                yield acquired
            finally:
                if acquired:
                    try:
                        lock.release()
                    except redis.exceptions.LockError as e:
                        logger.warning(f"Lock for {routine} expired before release: {e}")
            return

        lock = self._local_lock(routine)
        acquired = lock.acquire(blocking=False)
        try:
            yield acquired
        finally:
            if acquired:
                lock.release()
