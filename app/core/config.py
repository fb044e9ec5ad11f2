from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    shopify_store: Optional[str] = None
    shopify_access_token: Optional[str] = None
    shopify_api_version: str = "2024-01"
    shopify_request_timeout: Optional[float] = None
    product_page_limit: int = 250
    store_name: str = "TechHive"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    activity_log_capacity: int = 100
    activity_log_backend: str = "memory"  # memory, redis
    redis_url: str = "redis://localhost:6379/0"

    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"
    celery_timezone: str = "UTC"

    @property
    def shopify_configured(self) -> bool:
        return bool(self.shopify_store and self.shopify_access_token)

    class Config:
        env_file = ".env"


settings = Settings()
