"""Accounts API Application Entry Point.

Clean Architecture 기반 계정/세션 인증 서비스입니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.accounts.presentation.http.controllers import root_router
from apps.accounts.presentation.http.controllers.general.health import router as health_router
from apps.accounts.presentation.http.errors import register_exception_handlers
from apps.accounts.setup.config import get_settings
from apps.accounts.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    from apps.accounts.setup.dependencies import get_mailer, get_token_codec

    # Startup: RSA 키 로드
    get_token_codec()
    logger.info("Starting Accounts API")

    yield

    # Shutdown
    logger.info("Shutting down Accounts API")
    await get_mailer().drain()

    from apps.accounts.infrastructure.persistence_postgres.session import get_async_engine
    from apps.accounts.infrastructure.persistence_redis.client import get_revocation_redis

    await get_revocation_redis().aclose()
    await get_async_engine().dispose()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    # 로깅 설정
    setup_logging(
        settings.log_level,
        settings.log_json,
        service_name=settings.service_name,
        service_version=settings.service_version,
        environment=settings.environment,
    )

    app = FastAPI(
        title=settings.app_name,
        description="계정/세션 인증 서비스 (Clean Architecture)",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(root_router)
    app.include_router(health_router, tags=["general"])

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.accounts.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
