# app/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

# 핵심 설정 및 데이터베이스 모듈 임포트
from app.core.config import settings
from app.core.database import Database, create_db_and_tables, get_session, import_all_models
from app.core.exceptions import register_exception_handlers
from app.core.logger import configure_logging

from app import API_PREFIX

# 도메인 라우터 임포트
from app.domains.wo.routers import router as wo_router

logger = logging.getLogger(__name__)

# 문자열로 선언된 관계(Relationship)가 해석되도록 모든 도메인 모델을 등록합니다.
import_all_models()


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
# 애플리케이션 시작 및 종료 시 실행될 비동기 작업을 정의합니다.
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트(로깅, 데이터베이스 연결 풀)를 처리합니다.
    """
    configure_logging(settings.LOG_LEVEL)
    logger.info("%s %s 시작 중 (env=%s)...", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)

    # 테스트에서 미리 주입한 Database 가 있으면 그대로 사용합니다.
    owns_db = getattr(app.state, "db", None) is None
    if owns_db:
        app.state.db = Database.from_settings(settings)

    # 개발 환경에서만 테이블을 자동 생성합니다. 운영 환경은 Alembic 마이그레이션을 사용합니다.
    if settings.APP_ENV == "development":
        await create_db_and_tables(app.state.db.engine)

    yield  # 애플리케이션 실행

    logger.info("애플리케이션 종료 중...")
    if owns_db:
        await app.state.db.dispose()
        app.state.db = None
        logger.info("데이터베이스 연결 풀 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI (Interactive API documentation)
    redoc_url="/redoc",     # ReDoc (Alternative API documentation)
    lifespan=lifespan
)

# -- CORS (Cross-Origin Resource Sharing) 미들웨어 설정 --
# 프로덕션에서는 CORS_ORIGINS 를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 예외 핸들러 등록 --
# 모든 오류 응답은 {"message": "..."} 형태로 통일됩니다.
register_exception_handlers(app)

# -- 도메인 라우터 포함 --
app.include_router(wo_router, prefix=f"{API_PREFIX}/work-orders", tags=["Work Order Management (작업지시서 관리)"])


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
# 애플리케이션과 데이터베이스의 연결 상태를 확인하는 엔드포인트입니다.
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        # select(1)은 가장 가볍고 안전한 방법 중 하나입니다.
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database health check failed: No result from test query"
        )
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        # 연결 오류의 상세 내용은 응답에 포함하지 않습니다.
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database connection error during health check"
        )


# -- Uvicorn 서버 직접 실행 (개발용) --
# if __name__ == "__main__":
#     import uvicorn
#     uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
