"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealscope.api import get_provider_registry, health_router, search_router, shutdown_services
from dealscope.core.config import settings
from dealscope.core.logging import logger
from dealscope.providers import get_shared_http_client, shutdown_shared_http_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    registry = get_provider_registry(get_shared_http_client())
    configured = [name for name, ok in registry.status().items() if ok]
    if not configured:
        logger.warning("No provider API keys configured; /api/search will return 500")
    else:
        logger.info(f"Configured providers: {', '.join(configured)}")
    if not settings.redis_url:
        logger.warning("REDIS_URL is not set; L2 cache disabled (falls through to live fetch)")
    logger.info("Application started")
    yield
    logger.info("Shutting down application...")
    await shutdown_services()
    await shutdown_shared_http_client()


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(search_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
