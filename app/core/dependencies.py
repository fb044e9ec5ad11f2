"""
Process-scoped services.

The API routes receive these through ``Depends``; Celery tasks call the same
providers so both share one construction path. Tests replace them with
``app.dependency_overrides``.
"""
import logging
from functools import lru_cache
from typing import Optional

import redis

from app.core.config import Settings, settings
from app.factories.shopify_factory import ShopifyClientFactory
from app.services.activity_log import ActivityLog, RedisActivityLog
from app.services.automation import AutomationService, RoutineGuard
from app.services.shopify import ShopifyClient

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    return settings


@lru_cache
def get_redis_client() -> Optional[redis.Redis]:
    if settings.activity_log_backend != "redis":
        return None
    logger.info("Using Redis for activity log and routine locks")
    return redis.Redis.from_url(settings.redis_url, decode_responses=True)


@lru_cache
def get_activity_log() -> ActivityLog:
    client = get_redis_client()
    if client is not None:
        return RedisActivityLog(client, capacity=settings.activity_log_capacity)
    return ActivityLog(capacity=settings.activity_log_capacity)


@lru_cache
def get_shopify_client() -> ShopifyClient:
    return ShopifyClientFactory.from_settings(settings)


@lru_cache
def get_automation_service() -> AutomationService:
    return AutomationService(
        client=get_shopify_client(),
        activity_log=get_activity_log(),
        settings=settings,
        guard=RoutineGuard(redis_client=get_redis_client())
    )
