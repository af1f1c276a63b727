# tests/conftest.py

import os
from typing import AsyncGenerator, Callable, Awaitable
from contextlib import asynccontextmanager
from decimal import Decimal

# Settings 는 임포트 시점에 필수 환경 변수를 요구하므로 앱 임포트 전에 기본값을 지정합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest-only")
os.environ.setdefault("APP_ENV", "testing")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app  # noqa: E402
from app.core.database import Database, build_engine, create_db_and_tables, get_session  # noqa: E402
from app.core.security import create_access_token  # noqa: E402

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하려면 모든 모델 클래스가 임포트되어야 합니다.
from app.domains.models import *  # noqa: F401, F403, E402

from app.domains.corp import models as corp_models  # noqa: E402
from app.domains.usr import models as usr_models  # noqa: E402
from app.domains.usr.schemas import TenantContext  # noqa: E402
from app.domains.cus import models as cus_models  # noqa: E402
from app.domains.inv import models as inv_models  # noqa: E402


# --- 테스트용 데이터베이스 설정 ---
# 기본값은 테스트마다 새로 만드는 SQLite 파일입니다.
# PostgreSQL 로 실행하려면 TEST_DATABASE_URL 에 postgresql+asyncpg://... 를 지정합니다.
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_database(tmp_path) -> AsyncGenerator[Database, None]:
    """
    테스트 함수마다 독립적인 엔진과 스키마를 생성하고, 종료 시 모든 테이블을 삭제합니다.
    """
    url = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    engine = build_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await create_db_and_tables(engine)

    database = Database(engine)
    yield database

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await database.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_database: Database) -> AsyncGenerator[AsyncSession, None]:
    """
    테스트 데이터 준비 및 결과 검증용 세션입니다.
    API 요청은 요청마다 별도의 세션을 사용하므로 실제 운영과 같은 트랜잭션 경계를 가집니다.
    """
    async with test_database.session_factory() as session:
        yield session


# --- 회사(테넌트) 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_company(db_session: AsyncSession) -> corp_models.Company:
    """테스트용 회사A(호출자 테넌트)를 생성합니다."""
    company = corp_models.Company(name="테스트 정비소A", email="shop-a@example.com")
    db_session.add(company)
    await db_session.commit()
    await db_session.refresh(company)
    return company


@pytest_asyncio.fixture(scope="function")
async def test_other_company(db_session: AsyncSession) -> corp_models.Company:
    """테넌트 격리 확인용 회사B를 생성합니다."""
    company = corp_models.Company(name="테스트 정비소B", email="shop-b@example.com")
    db_session.add(company)
    await db_session.commit()
    await db_session.refresh(company)
    return company


# --- 사용자 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def user_factory(db_session: AsyncSession) -> Callable[..., Awaitable[usr_models.User]]:
    """
    회사와 역할을 지정하여 테스트 사용자를 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_user(
        email: str,
        company_id: str,
        role: usr_models.UserRole = usr_models.UserRole.TECHNICIAN,
        is_active: bool = True,
        **kwargs,
    ) -> usr_models.User:
        user_data = {
            "email": email,
            "first_name": kwargs.pop("first_name", "Test"),
            "last_name": kwargs.pop("last_name", "User"),
            "role": role,
            "company_id": company_id,
            "is_active": is_active,
            **kwargs,
        }
        user = usr_models.User(**user_data)
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def test_admin_user(user_factory: Callable, test_company: corp_models.Company) -> usr_models.User:
    """회사A의 관리자(ADMIN) 사용자를 생성합니다."""
    return await user_factory("admin@shop-a.example.com", test_company.id, role=usr_models.UserRole.ADMIN)


@pytest_asyncio.fixture(scope="function")
async def test_technician(user_factory: Callable, test_company: corp_models.Company) -> usr_models.User:
    """회사A의 정비사(TECHNICIAN)를 생성합니다."""
    return await user_factory(
        "tech@shop-a.example.com", test_company.id,
        first_name="Kim", last_name="Mechanic",
    )


@pytest_asyncio.fixture(scope="function")
async def test_inactive_user(user_factory: Callable, test_company: corp_models.Company) -> usr_models.User:
    """비활성화된 회사A 사용자를 생성합니다."""
    return await user_factory("inactive@shop-a.example.com", test_company.id, is_active=False)


@pytest_asyncio.fixture(scope="function")
async def test_other_user(user_factory: Callable, test_other_company: corp_models.Company) -> usr_models.User:
    """회사B의 관리자를 생성합니다."""
    return await user_factory("admin@shop-b.example.com", test_other_company.id, role=usr_models.UserRole.ADMIN)


# --- 고객/차량/재고 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_customer(db_session: AsyncSession, test_company: corp_models.Company) -> cus_models.Customer:
    customer = cus_models.Customer(
        first_name="Jane", last_name="Driver", email="jane@example.com", phone="010-1234-5678",
        company_id=test_company.id,
    )
    db_session.add(customer)
    await db_session.commit()
    await db_session.refresh(customer)
    return customer


@pytest_asyncio.fixture(scope="function")
async def test_vehicle(
    db_session: AsyncSession, test_company: corp_models.Company, test_customer: cus_models.Customer
) -> cus_models.Vehicle:
    vehicle = cus_models.Vehicle(
        make="Hyundai", model="Sonata", year=2021, vin="KMHE341DBLA000001", license_plate="12가3456",
        customer_id=test_customer.id, company_id=test_company.id,
    )
    db_session.add(vehicle)
    await db_session.commit()
    await db_session.refresh(vehicle)
    return vehicle


@pytest_asyncio.fixture(scope="function")
async def test_inventory_items(
    db_session: AsyncSession, test_company: corp_models.Company
) -> list[inv_models.InventoryItem]:
    """회사A의 재고 품목 2건을 생성합니다."""
    items = [
        inv_models.InventoryItem(
            name="Brake Pad", sku="BP-001", unit_price=Decimal("45.00"), quantity=20, company_id=test_company.id
        ),
        inv_models.InventoryItem(
            name="Oil Filter", sku="OF-010", unit_price=Decimal("12.50"), quantity=50, company_id=test_company.id
        ),
    ]
    db_session.add_all(items)
    await db_session.commit()
    for item in items:
        await db_session.refresh(item)
    return items


@pytest.fixture
def tenant_a(test_company: corp_models.Company, test_admin_user: usr_models.User) -> TenantContext:
    return TenantContext(company_id=test_company.id, user_id=test_admin_user.id)


@pytest.fixture
def tenant_b(test_other_company: corp_models.Company, test_other_user: usr_models.User) -> TenantContext:
    return TenantContext(company_id=test_other_company.id, user_id=test_other_user.id)


@pytest.fixture
def work_order_payload(
    test_customer: cus_models.Customer,
    test_vehicle: cus_models.Vehicle,
    test_technician: usr_models.User,
    test_inventory_items: list[inv_models.InventoryItem],
) -> Callable[..., dict]:
    """
    작업지시서 생성 요청 본문(camelCase)을 만드는 함수를 반환합니다.
    기본값은 작업 항목 1건, 부품 1건(수량 2)입니다.
    """
    ids = {
        "customerId": test_customer.id,
        "vehicleId": test_vehicle.id,
        "technicianId": test_technician.id,
        "itemIds": [item.id for item in test_inventory_items],
    }

    def _build(**overrides) -> dict:
        payload = {
            "description": "Front brake service",
            "customerId": ids["customerId"],
            "vehicleId": ids["vehicleId"],
            "technicianId": ids["technicianId"],
            "tasks": [{"title": "Replace pads", "description": "Replace front brake pads"}],
            "parts": [{"inventoryItemId": ids["itemIds"][0], "quantity": 2}],
        }
        payload.update(overrides)
        return payload

    _build.item_ids = ids["itemIds"]
    return _build


# --- 인증 클라이언트 픽스처 ---
def _session_overrides(test_database: Database) -> dict:
    """요청마다 테스트 데이터베이스의 새 세션을 제공하도록 세션 의존성을 교체합니다."""
    async def override_get_session():
        async with test_database.session_factory() as session:
            yield session

    # deps.get_db_session 은 get_session 과 같은 callable 입니다.
    return {get_session: override_get_session}


@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(
    test_database: Database,
) -> Callable[[usr_models.User], AsyncGenerator[AsyncClient, None]]:
    """
    특정 사용자의 Bearer 토큰을 가진 AsyncClient를 생성하는 팩토리 함수를 반환합니다.
    테넌트 의존성은 오버라이드하지 않으므로 실제 토큰 검증과 사용자 조회를 거칩니다.
    """
    @asynccontextmanager
    async def _create_client_context(user: usr_models.User) -> AsyncGenerator[AsyncClient, None]:
        original_overrides = main_app.dependency_overrides.copy()
        try:
            main_app.dependency_overrides.update(_session_overrides(test_database))

            transport = ASGITransport(app=main_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                token = create_access_token(data={"sub": user.id})
                client.headers["Authorization"] = f"Bearer {token}"
                print(f"DEBUG IN FACTORY: Client for user '{user.email}' created with token starting: {token[:10]}...")
                yield client
        finally:
            # 테스트가 끝난 후 원래 의존성 상태로 되돌립니다.
            main_app.dependency_overrides.clear()
            main_app.dependency_overrides.update(original_overrides)

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def admin_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_admin_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """회사A 관리자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_admin_user) as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def other_company_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_other_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """회사B 관리자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_other_user) as client:
        yield client


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(test_database: Database) -> AsyncGenerator[AsyncClient, None]:
    """
    인증되지 않은 사용자를 위한 AsyncClient 인스턴스를 생성하고,
    테스트용 비동기 DB 세션을 주입합니다.
    """
    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides.update(_session_overrides(test_database))
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
