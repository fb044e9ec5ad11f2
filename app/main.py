from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.endpoints.automation import router as automation_router
from app.api.v1.endpoints.products import router as products_router
from app.api.v1.endpoints.system import APP_DESCRIPTION, APP_NAME, APP_VERSION, \
    router as system_router
from app.constants.automation import ActivityAction
from app.core.config import settings
from app.core.dependencies import get_activity_log

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)
_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _logger.info(f"{APP_NAME} v{APP_VERSION} running on port {settings.port}")
    _logger.info(f"Shopify configured: {settings.shopify_configured}")
    get_activity_log().record(
        ActivityAction.SERVER_START, f"Server started on port {settings.port}"
    )
    yield


app = FastAPI(
    title=APP_NAME,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products_router, prefix="/api")
app.include_router(automation_router, prefix="/api")
app.include_router(system_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
