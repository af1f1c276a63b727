# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- 설정값으로부터 SQLModel/SQLAlchemy 비동기 엔진과 세션 팩토리를 생성합니다.
- 엔진은 모듈 전역 변수가 아니라 `Database` 객체에 담겨 애플리케이션 수명 주기(lifespan)에서
  열리고 닫히며, `app.state.db` 를 통해 요청마다 세션을 제공합니다.
- 개발용 테이블 생성 함수를 포함합니다 (운영 환경은 Alembic 사용).
"""

import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import configure_mappers, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import Settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # noqa: ANN001
    # SQLite 는 연결마다 외래 키 검사를 켜야 합니다.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(
    database_url: str,
    *,
    echo: bool = False,
    pool_size: int = 10,
    max_overflow: int = 20,
    pool_recycle: int = 3600,
) -> AsyncEngine:
    """
    데이터베이스 URL 에 맞는 비동기 엔진을 생성합니다.
    SQLite(aiosqlite)는 커넥션 풀 옵션을 받지 않으므로 드라이버별로 인자를 구분합니다.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # 메모리 DB 는 단일 연결을 공유해야 테이블이 유지됩니다.
        if make_url(database_url).database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_async_engine(database_url, echo=echo, **kwargs)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        database_url,
        echo=echo,                  # 디버그 모드일 때만 SQL 쿼리 출력
        pool_pre_ping=True,
        pool_recycle=pool_recycle,  # PostgreSQL 유휴 타임아웃 이전에 연결 재활용
        pool_size=pool_size,
        max_overflow=max_overflow,
    )


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    """비동기 세션을 생성하는 '세션 공장'을 정의합니다."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


class Database:
    """
    엔진과 세션 팩토리를 함께 보관하는 영속성 핸들입니다.
    애플리케이션 시작 시 생성되고 종료 시 `dispose()` 로 연결 풀을 닫습니다.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = build_session_factory(engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        engine = build_engine(
            settings.DATABASE_URL.get_secret_value(),
            echo=settings.DEBUG_MODE,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
        return cls(engine)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        스크립트 등 요청 밖의 비동기 컨텍스트에서 사용할 독립적인 세션을 제공합니다.
        블록이 정상 종료되면 커밋하고, 예외가 발생하면 롤백합니다.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        await self.engine.dispose()


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
_mappers_configured = False


def import_all_models() -> None:
    """
    모든 SQLModel 클래스가 SQLModel.metadata 에 등록되도록 도메인 모델을 임포트합니다.
    순환 임포트를 피하기 위해 함수 내부에서 임포트합니다.
    """
    from app.domains import models  # noqa: F401


async def create_db_and_tables(engine: AsyncEngine) -> None:
    """
    데이터베이스 테이블을 생성합니다. 개발/테스트 환경 전용이며 기존 테이블은 삭제하지 않습니다.
    """
    global _mappers_configured
    import_all_models()

    if not _mappers_configured:
        configure_mappers()
        _mappers_configured = True

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created (or already present).")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
def get_database(request: Request) -> Database:
    db: Optional[Database] = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not initialised; application lifespan has not run.")
    return db


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with get_database(request).session_factory() as session:
        yield session
